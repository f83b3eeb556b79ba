"""
Tests for the pure view helpers.
"""

from genga.state import EncodedImage, GeneratedFrame, RequestStatus, StudioState
from genga.strings import STRINGS
from genga.view import (
    OutputPanel,
    can_generate,
    description_copy,
    frame_caption,
    frame_filename,
    frames_label,
    generate_label,
    output_panel,
    show_suggestions,
)

EN = STRINGS["en"]


def _frame(position, mime="image/jpeg"):
    return GeneratedFrame(position=position, image=EncodedImage(mime_type=mime, data=b"x"))


class TestOutputPanel:
    def test_empty(self):
        assert output_panel(StudioState()) is OutputPanel.EMPTY

    def test_results(self):
        assert output_panel(StudioState(frames=[_frame(0)])) is OutputPanel.RESULTS

    def test_error_beats_results(self):
        state = StudioState(frames=[_frame(0)], error="boom")
        assert output_panel(state) is OutputPanel.ERROR

    def test_loading_beats_everything(self):
        state = StudioState(frames=[_frame(0)], error="boom", status=RequestStatus.GENERATING)
        assert output_panel(state) is OutputPanel.LOADING

    def test_analyzing_is_not_loading(self):
        assert output_panel(StudioState(status=RequestStatus.ANALYZING)) is OutputPanel.EMPTY


class TestModeCopy:
    def test_scene_mode(self):
        state = StudioState()
        state.request.frame_count = 4
        assert description_copy(state, EN)["label"] == EN["description_scene"]
        assert frames_label(state, EN) == "Number of key frames (4)"
        assert generate_label(state, EN) == EN["generate_button"]

    def test_edit_mode(self):
        state = StudioState()
        state.request.reference_image = EncodedImage(mime_type="image/png", data=b"x")
        assert description_copy(state, EN)["label"] == EN["description_edit"]
        assert frames_label(state, EN) == EN["frames_label_edit"]
        assert generate_label(state, EN) == EN["modify_button"]

    def test_generating_label_and_disabled(self):
        state = StudioState(status=RequestStatus.GENERATING)
        assert generate_label(state, EN) == EN["generating_button"]
        assert can_generate(state) is False
        assert can_generate(StudioState(status=RequestStatus.ANALYZING)) is False
        assert can_generate(StudioState()) is True

    def test_suggestions_hidden_while_analyzing(self):
        assert show_suggestions(StudioState(suggestions=["a"])) is True
        assert show_suggestions(StudioState(suggestions=["a"], status=RequestStatus.ANALYZING)) is False
        assert show_suggestions(StudioState()) is False


def test_frame_caption_and_filename():
    assert frame_caption(_frame(2)) == "原画 #3"
    assert frame_filename(_frame(0)) == "genga_1.jpg"
    assert frame_filename(_frame(1, "image/png")) == "genga_2.png"

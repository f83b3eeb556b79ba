"""
Pure view helpers: which panel to show and what the mode-dependent copy reads.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from .state import GeneratedFrame, RequestStatus, StudioState
from .utils import extension_for


class OutputPanel(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    RESULTS = "results"
    EMPTY = "empty"


def output_panel(state: StudioState) -> OutputPanel:
    if state.status is RequestStatus.GENERATING:
        return OutputPanel.LOADING
    if state.error:
        return OutputPanel.ERROR
    if state.frames:
        return OutputPanel.RESULTS
    return OutputPanel.EMPTY


def description_copy(state: StudioState, strings: Dict[str, str]) -> Dict[str, object]:
    """Label, placeholder and height of the description box."""
    if state.request.is_edit:
        return {
            "label": strings["description_edit"],
            "placeholder": strings["placeholder_edit"],
            "height": 120,
        }
    return {
        "label": strings["description_scene"],
        "placeholder": strings["placeholder_scene"],
        "height": 170,
    }


def frames_label(state: StudioState, strings: Dict[str, str]) -> str:
    if state.request.is_edit:
        return strings["frames_label_edit"]
    return strings["frames_label"].format(count=state.request.frame_count)


def generate_label(state: StudioState, strings: Dict[str, str]) -> str:
    if state.status is RequestStatus.GENERATING:
        return strings["generating_button"]
    return strings["modify_button"] if state.request.is_edit else strings["generate_button"]


def can_generate(state: StudioState) -> bool:
    return not state.is_busy


def show_suggestions(state: StudioState) -> bool:
    return state.status is not RequestStatus.ANALYZING and bool(state.suggestions)


def frame_caption(frame: GeneratedFrame) -> str:
    return f"原画 #{frame.number}"


def frame_filename(frame: GeneratedFrame) -> str:
    return f"genga_{frame.number}.{extension_for(frame.image.mime_type)}"

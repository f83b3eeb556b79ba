"""
Tests for continuation frames (image-conditioned) and key frames (text-to-image).
"""

import pytest

from genga.errors import NoImagesReturned
from genga.frame_generator import (
    EDIT_MODE,
    KEY_FRAMES_MODE,
    generate_continuation_frame,
    generate_key_frames,
)
from genga.prompts import build_continuation_prompt, build_key_frames_prompt
from tests.conftest import edit_response, images_response


class TestPrompts:
    def test_continuation_prompt_embeds_style_and_change(self):
        prompt = build_continuation_prompt("step back", "Gothic Horror")
        assert "Style: Gothic Horror." in prompt
        assert "Requested change: step back." in prompt
        assert "clean lines" in prompt

    def test_key_frames_prompt(self):
        prompt = build_key_frames_prompt("dragon\n fight", "cinematic action", 3)
        assert prompt.startswith("Create 3 sequential key animation frames")
        assert "Scene description: dragon fight." in prompt
        assert "Do not include any numbers or text" in prompt


class TestContinuationFrame:
    def test_wraps_each_inline_image(self, fake_client, reference_image, png_bytes):
        fake_client.models.content_results.append(edit_response(images=[png_bytes, png_bytes], notes=["Here you go"]))

        frames = generate_continuation_frame(fake_client, reference_image, "step back", "Studio Magic", model="edit-model")

        assert [f.number for f in frames] == [1, 2]
        assert frames[0].image.mime_type == "image/png"
        assert frames[0].image.data == png_bytes
        call = fake_client.models.calls[0]
        assert call.model == "edit-model"
        assert call.contents[0].inline_data.data == reference_image.data
        assert "Requested change: step back." in call.contents[1]
        assert list(call.config.response_modalities) == ["IMAGE", "TEXT"]

    def test_text_only_response_is_domain_failure(self, fake_client, reference_image):
        fake_client.models.content_results.append(edit_response(notes=["I can't draw that"]))
        with pytest.raises(NoImagesReturned) as info:
            generate_continuation_frame(fake_client, reference_image, "step back", "Studio Magic")
        assert info.value.mode == EDIT_MODE

    def test_no_candidates_is_domain_failure(self, fake_client, reference_image):
        from types import SimpleNamespace

        fake_client.models.content_results.append(SimpleNamespace(candidates=None))
        with pytest.raises(NoImagesReturned):
            generate_continuation_frame(fake_client, reference_image, "step back", "Studio Magic")


class TestKeyFrames:
    def test_requests_count_at_fixed_format(self, fake_client, jpeg_bytes):
        fake_client.models.image_results.append(images_response([jpeg_bytes] * 3))

        frames = generate_key_frames(fake_client, "dragon fight", "cinematic action", 3, model="image-model")

        assert [f.number for f in frames] == [1, 2, 3]
        assert all(f.image.mime_type == "image/jpeg" for f in frames)
        call = fake_client.models.calls[0]
        assert call.kind == "generate_images"
        assert call.model == "image-model"
        assert call.config.number_of_images == 3
        assert call.config.aspect_ratio == "16:9"
        assert call.config.output_mime_type == "image/jpeg"
        assert "cinematic action" in call.prompt

    def test_empty_result_is_domain_failure(self, fake_client):
        fake_client.models.image_results.append(images_response([]))
        with pytest.raises(NoImagesReturned) as info:
            generate_key_frames(fake_client, "dragon fight", "cinematic action", 2)
        assert info.value.mode == KEY_FRAMES_MODE

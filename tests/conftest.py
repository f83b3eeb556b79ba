"""
Shared fixtures: a fake Gemini client that records calls, and sample images.
"""

import io
from types import SimpleNamespace

import pytest
from PIL import Image

from genga.config import StudioSettings
from genga.state import EncodedImage
from genga.studio import GengaStudio


def make_image_bytes(fmt: str = "PNG", size=(8, 8), color=(200, 40, 40)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format=fmt)
    return buf.getvalue()


def analysis_response(text):
    return SimpleNamespace(text=text)


def edit_response(images=(), notes=()):
    parts = [SimpleNamespace(text=note, inline_data=None) for note in notes]
    parts += [
        SimpleNamespace(text=None, inline_data=SimpleNamespace(mime_type="image/png", data=data))
        for data in images
    ]
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


def images_response(images=()):
    return SimpleNamespace(
        generated_images=[
            SimpleNamespace(image=SimpleNamespace(image_bytes=data, mime_type="image/jpeg"))
            for data in images
        ]
    )


class FakeModels:
    """Stands in for ``genai.Client().models``; answers from queued results."""

    def __init__(self):
        self.calls = []
        self.content_results = []
        self.image_results = []
        self.on_call = None

    def _answer(self, queue):
        if self.on_call is not None:
            self.on_call()
        outcome = queue.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def generate_content(self, model, contents, config=None):
        self.calls.append(SimpleNamespace(kind="generate_content", model=model, contents=contents, config=config))
        return self._answer(self.content_results)

    def generate_images(self, model, prompt, config=None):
        self.calls.append(SimpleNamespace(kind="generate_images", model=model, prompt=prompt, config=config))
        return self._answer(self.image_results)


class FakeClient:
    def __init__(self):
        self.models = FakeModels()


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def settings():
    return StudioSettings(api_key="test-key", language="en")


@pytest.fixture
def studio(fake_client, settings):
    return GengaStudio(fake_client, settings=settings)


@pytest.fixture
def png_bytes():
    return make_image_bytes("PNG")


@pytest.fixture
def jpeg_bytes():
    return make_image_bytes("JPEG")


@pytest.fixture
def reference_image(png_bytes):
    return EncodedImage(mime_type="image/png", data=png_bytes)

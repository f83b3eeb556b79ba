"""
Frame Generator - image-conditioned continuation and text-to-image key frames.
"""

from __future__ import annotations

from typing import List

from google.genai import types as genai_types

from .config import (
    DEFAULT_EDIT_MODEL,
    DEFAULT_IMAGE_MODEL,
    EDIT_FRAME_MIME,
    KEY_FRAME_ASPECT_RATIO,
    KEY_FRAME_MIME,
)
from .errors import NoImagesReturned
from .prompts import build_continuation_prompt, build_key_frames_prompt
from .state import EncodedImage, GeneratedFrame
from .utils import get_logger

logger = get_logger("frame_generator")

EDIT_MODE = "edit"
KEY_FRAMES_MODE = "key_frames"


def generate_continuation_frame(
    client,
    image: EncodedImage,
    change: str,
    style: str,
    model: str = DEFAULT_EDIT_MODEL,
) -> List[GeneratedFrame]:
    """
    Draw the frame that follows ``image`` after applying ``change``.

    Raises:
        NoImagesReturned: the response carried no inline image
    """
    image_part = genai_types.Part.from_bytes(data=image.data, mime_type=image.mime_type)
    response = client.models.generate_content(
        model=model,
        contents=[image_part, build_continuation_prompt(change, style)],
        config=genai_types.GenerateContentConfig(
            response_modalities=["IMAGE", "TEXT"],
        ),
    )

    images: List[EncodedImage] = []
    candidates = response.candidates or []
    if candidates and candidates[0].content and candidates[0].content.parts:
        for part in candidates[0].content.parts:
            if part.inline_data is not None and part.inline_data.data:
                images.append(
                    EncodedImage(
                        mime_type=part.inline_data.mime_type or EDIT_FRAME_MIME,
                        data=part.inline_data.data,
                    )
                )
            elif part.text:
                logger.info(f"Edit model note: {part.text.strip()[:200]}")

    if not images:
        raise NoImagesReturned(EDIT_MODE)
    logger.info(f"Continuation frame generated ({len(images)} image(s))")
    return [GeneratedFrame(position=i, image=img) for i, img in enumerate(images)]


def generate_key_frames(
    client,
    description: str,
    style: str,
    count: int,
    model: str = DEFAULT_IMAGE_MODEL,
) -> List[GeneratedFrame]:
    """
    Generate ``count`` sequential key frames for a scene description.

    Raises:
        NoImagesReturned: the response carried no generated image
    """
    response = client.models.generate_images(
        model=model,
        prompt=build_key_frames_prompt(description, style, count),
        config=genai_types.GenerateImagesConfig(
            number_of_images=count,
            output_mime_type=KEY_FRAME_MIME,
            aspect_ratio=KEY_FRAME_ASPECT_RATIO,
        ),
    )

    images: List[EncodedImage] = []
    for generated in response.generated_images or []:
        image = generated.image
        if image is None or not image.image_bytes:
            continue
        images.append(EncodedImage(mime_type=image.mime_type or KEY_FRAME_MIME, data=image.image_bytes))

    if not images:
        raise NoImagesReturned(KEY_FRAMES_MODE)
    if len(images) < count:
        logger.warning(f"Requested {count} key frames, received {len(images)}")
    logger.info(f"Key frames generated ({len(images)} image(s))")
    return [GeneratedFrame(position=i, image=img) for i, img in enumerate(images)]

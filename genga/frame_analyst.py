"""
Frame Analyst - suggests next-movement prompts for an uploaded key frame.
"""

from __future__ import annotations

import json
from typing import List, Optional

from google.genai import types as genai_types

from .config import DEFAULT_ANALYSIS_MODEL
from .prompts import SUGGESTION_ITEM_DESCRIPTION, build_analysis_prompt
from .state import EncodedImage
from .utils import get_logger

logger = get_logger("frame_analyst")

SUGGESTION_SCHEMA = genai_types.Schema(
    type=genai_types.Type.OBJECT,
    properties={
        "suggestions": genai_types.Schema(
            type=genai_types.Type.ARRAY,
            items=genai_types.Schema(
                type=genai_types.Type.STRING,
                description=SUGGESTION_ITEM_DESCRIPTION,
            ),
        ),
    },
)


def parse_suggestions(text: Optional[str]) -> List[str]:
    """
    Extract the ``suggestions`` array from a JSON response.

    Blank text or a payload with the wrong shape yields an empty list.
    Text that is not JSON at all raises ``json.JSONDecodeError``.
    """
    if not text or not text.strip():
        return []
    payload = json.loads(text)
    if not isinstance(payload, dict):
        return []
    items = payload.get("suggestions")
    if not isinstance(items, list):
        return []
    return [item.strip() for item in items if isinstance(item, str) and item.strip()]


def suggest_next_actions(
    client,
    image: EncodedImage,
    language: str = "English",
    model: str = DEFAULT_ANALYSIS_MODEL,
    thinking_config: Optional[genai_types.ThinkingConfig] = None,
) -> List[str]:
    """
    Ask the analysis model for short follow-up prompts for ``image``.

    Returns:
        Suggestions in the order the model gave them (may be empty).
    """
    image_part = genai_types.Part.from_bytes(data=image.data, mime_type=image.mime_type)
    response = client.models.generate_content(
        model=model,
        contents=[image_part, build_analysis_prompt(language)],
        config=genai_types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=SUGGESTION_SCHEMA,
            thinking_config=thinking_config,
        ),
    )
    text = response.text or ""
    logger.info(f"Frame analyst response received ({len(text)} chars)")
    suggestions = parse_suggestions(text)
    if not suggestions:
        logger.warning("Frame analyst returned no usable suggestions")
    return suggestions

"""
Configuration, constants, and settings for Genga Frame Studio.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

# ---------- Models ----------
DEFAULT_ANALYSIS_MODEL = "gemini-2.5-flash"
DEFAULT_EDIT_MODEL = "gemini-2.5-flash-image-preview"
DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"

# ---------- Generation ----------
MIN_FRAMES = 1
MAX_FRAMES = 5
DEFAULT_FRAMES = 3

# Text-to-image output is fixed; the edit model decides its own format.
KEY_FRAME_ASPECT_RATIO = "16:9"
KEY_FRAME_MIME = "image/jpeg"
EDIT_FRAME_MIME = "image/png"

UPLOAD_TYPES = ["png", "jpg", "jpeg", "webp", "gif"]

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class StudioSettings:
    """Runtime settings read from the environment."""
    api_key: Optional[str]
    analysis_model: str = DEFAULT_ANALYSIS_MODEL
    edit_model: str = DEFAULT_EDIT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    language: str = DEFAULT_LANGUAGE
    think_budget: Optional[int] = None


def load_settings() -> StudioSettings:
    """
    Build settings from environment variables.

    GEMINI_API_KEY is preferred; GOOGLE_GENAI_API_KEY is kept for compatibility.
    """
    budget = os.getenv("GEMINI_THINK_BUDGET")
    try:
        think_budget = int(budget) if budget is not None else None
    except ValueError:
        think_budget = None
    return StudioSettings(
        api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_GENAI_API_KEY"),
        analysis_model=os.getenv("GENGA_ANALYSIS_MODEL", DEFAULT_ANALYSIS_MODEL),
        edit_model=os.getenv("GENGA_EDIT_MODEL", DEFAULT_EDIT_MODEL),
        image_model=os.getenv("GENGA_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        language=os.getenv("GENGA_LANGUAGE", DEFAULT_LANGUAGE).strip().lower(),
        think_budget=think_budget,
    )

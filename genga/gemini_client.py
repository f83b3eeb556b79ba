"""
Gemini API client construction and request configuration.
"""

from __future__ import annotations
from typing import Optional

from google import genai
from google.genai import types as genai_types

from .config import StudioSettings
from .utils import get_logger

logger = get_logger("gemini_client")


def get_genai_client(api_key: Optional[str]) -> Optional["genai.Client"]:
    """
    Initialize and return a Gemini API client.

    Args:
        api_key: Key from the sidebar or the environment

    Returns:
        genai.Client instance or None if no key is available
    """
    if not api_key:
        return None
    try:
        return genai.Client(api_key=api_key)
    except Exception as exc:
        logger.error(f"Could not create Gemini client: {exc}")
        return None


def get_thinking_config(settings: StudioSettings) -> Optional[genai_types.ThinkingConfig]:
    """
    Thinking configuration for the analysis call, or None if not configured.
    """
    if settings.think_budget is None:
        return None
    return genai_types.ThinkingConfig(thinking_budget=settings.think_budget)

"""
Prompt templates sent to the Gemini models.
"""

from __future__ import annotations

ANALYSIS_PROMPT = """Analyze this anime key frame (genga).
Suggest exactly 3 possible modifications or next movements that describe the next frame in the sequence.
The suggestions must be short and suitable as prompts for an image AI.
Example: "raises his sword higher", "takes a step back", "his eyes glow with anger".
Respond in {language} only."""

SUGGESTION_ITEM_DESCRIPTION = "A suggested next movement"

CONTINUATION_PROMPT = """Draw the next anime key frame (genga) in the sequence based on the image and the description.
Style: {style}.
Requested change: {change}.
The result must be drawn with clean lines as a direct continuation of the input image."""

KEY_FRAMES_PROMPT = """Create {count} sequential key animation frames (genga) for an anime scene.
Style: {style}.
Scene description: {description}.
Each frame must show a clear progression in the motion. The drawing must use clean lines suitable for animation production. Do not include any numbers or text on the images themselves."""


def _clean(text: str) -> str:
    return " ".join(text.split())


def build_analysis_prompt(language: str) -> str:
    return ANALYSIS_PROMPT.format(language=language)


def build_continuation_prompt(change: str, style: str) -> str:
    return CONTINUATION_PROMPT.format(style=_clean(style), change=_clean(change))


def build_key_frames_prompt(description: str, style: str, count: int) -> str:
    return KEY_FRAMES_PROMPT.format(
        count=count,
        style=_clean(style),
        description=_clean(description),
    )

"""
Exceptions raised by the Genga service adapters and controller.
"""

from __future__ import annotations


class GengaError(Exception):
    """Base class for studio errors."""


class SceneValidationError(GengaError):
    """The scene request cannot be sent (e.g. empty description)."""


class InvalidImageError(GengaError):
    """Uploaded bytes are not a readable image."""


class NoImagesReturned(GengaError):
    """The service answered but produced no usable image."""

    def __init__(self, mode: str, detail: str = ""):
        self.mode = mode
        message = f"No images returned in {mode} mode"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

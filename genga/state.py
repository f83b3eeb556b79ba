"""
Session state for the studio: scene request, suggestions, frames and status.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .config import DEFAULT_FRAMES, MAX_FRAMES, MIN_FRAMES
from .utils import decode_payload, parse_data_url, to_data_url


@dataclass(frozen=True)
class EncodedImage:
    """Raw image bytes plus MIME type, convertible to and from a data URL."""
    mime_type: str
    data: bytes

    @classmethod
    def from_data_url(cls, data_url: str) -> "EncodedImage":
        """Decode an image supplied as a base64 data URL rather than an upload."""
        mime, payload = parse_data_url(data_url)
        return cls(mime_type=mime, data=decode_payload(payload))

    @property
    def data_url(self) -> str:
        return to_data_url(self.data, self.mime_type)


@dataclass
class SceneRequest:
    description: str = ""
    style: str = ""
    frame_count: int = DEFAULT_FRAMES
    reference_image: Optional[EncodedImage] = None

    @property
    def is_edit(self) -> bool:
        return self.reference_image is not None

    @property
    def effective_frame_count(self) -> int:
        # An edit always yields a single continuation frame.
        return 1 if self.is_edit else self.frame_count


@dataclass(frozen=True)
class GeneratedFrame:
    position: int
    image: EncodedImage

    @property
    def number(self) -> int:
        return self.position + 1


class RequestStatus(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    GENERATING = "generating"


@dataclass
class StudioState:
    request: SceneRequest = field(default_factory=SceneRequest)
    suggestions: List[str] = field(default_factory=list)
    frames: List[GeneratedFrame] = field(default_factory=list)
    status: RequestStatus = RequestStatus.IDLE
    error: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self.status is not RequestStatus.IDLE


def validate_frame_count(count: int) -> int:
    if not MIN_FRAMES <= count <= MAX_FRAMES:
        raise ValueError(f"frame_count must be between {MIN_FRAMES} and {MAX_FRAMES}, got {count}")
    return count

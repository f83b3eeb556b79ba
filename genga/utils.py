"""
Utility functions for Genga Frame Studio.
"""

from __future__ import annotations
import base64
import binascii
import io
import logging
import os
import re
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from .errors import InvalidImageError

DEFAULT_IMAGE_MIME = "image/jpeg"

_DATA_URL_MIME = re.compile(r":(.*?);")
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger under the ``genga`` namespace.

    The handler is attached once to the package root logger so repeated
    Streamlit reruns do not stack duplicate handlers.
    """
    root = logging.getLogger("genga")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.getenv("GENGA_LOG_LEVEL", "INFO").upper())
    return root.getChild(name)


def parse_data_url(data_url: str) -> Tuple[str, str]:
    """
    Split a base64 data URL into its MIME type and payload.

    Args:
        data_url: String like ``data:image/png;base64,iVBOR...``

    Returns:
        Tuple of (mime_type, base64_payload). The MIME type falls back to
        ``image/jpeg`` when the header does not carry one.

    Uploads arrive as raw bytes (see ``load_image_bytes``); this is the entry
    point for images handed over as data URLs instead.
    """
    header, _, payload = data_url.partition(",")
    match = _DATA_URL_MIME.search(header)
    mime = match.group(1).strip() if match else ""
    return mime or DEFAULT_IMAGE_MIME, payload


def to_data_url(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def decode_payload(payload: str) -> bytes:
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidImageError(f"Invalid base64 image payload: {exc}") from exc


def load_image_bytes(file) -> Tuple[bytes, str]:
    """
    Read an uploaded file and detect its image MIME type.

    Args:
        file: Streamlit UploadedFile object (or any binary file-like)

    Returns:
        Tuple of (image_bytes, mime_type). The bytes are returned untouched;
        Pillow is only used to confirm the payload is an image.
    """
    data = file.getvalue() if hasattr(file, "getvalue") else file.read()
    try:
        with Image.open(io.BytesIO(data)) as image:
            fmt = image.format
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise InvalidImageError(f"Unreadable image upload: {exc}") from exc
    mime = Image.MIME.get(fmt or "") or getattr(file, "type", None) or DEFAULT_IMAGE_MIME
    return data, mime


def extension_for(mime_type: str) -> str:
    """File extension for an image MIME type, ``png`` when unknown."""
    subtype = mime_type.split("/", 1)[-1].lower()
    if subtype in ("jpeg", "pjpeg"):
        return "jpg"
    return subtype if subtype in ("png", "webp", "gif") else "png"

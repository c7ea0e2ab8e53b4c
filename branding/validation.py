from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import Optional

from PIL import Image, UnidentifiedImageError


MAX_FILE_SIZE = 5 * 1024 * 1024
MIN_DIMENSION = 1024
PNG_MIMETYPE = "image/png"

COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


class ValidationError(Exception):
    """Upload rejected before any processing. ``status`` is the HTTP class."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass(frozen=True)
class UploadedFile:
    content_type: str
    size: int
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes, content_type: str = PNG_MIMETYPE) -> "UploadedFile":
        return cls(content_type=content_type, size=len(data), data=data)


@dataclass(frozen=True)
class SourceImage:
    width: int
    height: int
    has_alpha: bool
    image: Image.Image


def is_valid_color(value: Optional[str]) -> bool:
    return bool(value) and COLOR_RE.fullmatch(value) is not None


def _read_metadata(data: bytes) -> Image.Image:
    try:
        im = Image.open(io.BytesIO(data))
        # decode pixel data too; a truncated body only fails here
        im.load()
    except (UnidentifiedImageError, OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise ValidationError("Invalid or corrupted PNG file") from e
    return im


def validate_upload(upload: Optional[UploadedFile], background_color: Optional[str]) -> SourceImage:
    """Check an upload in the fixed order and return its decoded handle.

    Raises ValidationError on the first failing check. Size overflow is
    reported with status 413, every other rejection with 400.
    """
    if upload is None:
        raise ValidationError("No file provided")

    if not is_valid_color(background_color):
        raise ValidationError("Invalid background color format")

    if upload.content_type != PNG_MIMETYPE:
        raise ValidationError("File must be a PNG image")

    if upload.size == 0:
        raise ValidationError("File is empty")

    if upload.size > MAX_FILE_SIZE:
        raise ValidationError(
            f"File size exceeds 5MB limit ({upload.size / 1024 / 1024:.2f}MB)",
            status=413,
        )

    im = _read_metadata(upload.data)
    width, height = im.size
    if not width or not height:
        raise ValidationError("Unable to read image dimensions")

    if width != height:
        raise ValidationError(
            f"Image must be square. Current: {width}x{height}px. Please provide a square image."
        )

    if width < MIN_DIMENSION or height < MIN_DIMENSION:
        raise ValidationError(
            f"Image must be at least {MIN_DIMENSION}x{MIN_DIMENSION}px. "
            f"Current: {width}x{height}px. Please upload a larger image."
        )

    has_alpha = im.mode in ("RGBA", "LA", "PA") or "transparency" in im.info
    return SourceImage(width=width, height=height, has_alpha=has_alpha, image=im)

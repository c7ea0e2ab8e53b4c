"""Image transforms that turn one square logo into the Expo branding set.

Every transform reads the same decoded source and returns a new image, so
they are independent of each other and may run in any order.
"""
from __future__ import annotations

import io
import logging
import math
import re
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from PIL import Image, ImageChops, ImageOps


logger = logging.getLogger(__name__)

ICON_SIZE = 1024
FAVICON_SIZE = 48
ADAPTIVE_PADDING_PERCENT = 20
SPLASH_SIZE = (1242, 2436)
SPLASH_LOGO_RATIO = 0.4

TRANSPARENT = (0, 0, 0, 0)

ASSET_FILENAMES = {
    "icon": "icon.png",
    "adaptive_icon_foreground": "adaptive-icon-foreground.png",
    "adaptive_icon_background": "adaptive-icon-background.png",
    "android_icon_monochrome": "android-icon-monochrome.png",
    "splash": "splash.png",
    "favicon": "favicon.png",
}

_HEX_RE = re.compile(r"^#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})\Z", re.IGNORECASE)

RGB = Tuple[int, int, int]


class InvalidColorError(ValueError):
    pass


class AssetGenerationError(Exception):
    pass


@dataclass(frozen=True)
class OutputBundle:
    icon: bytes
    adaptive_icon_foreground: bytes
    adaptive_icon_background: bytes
    android_icon_monochrome: bytes
    splash: bytes
    favicon: bytes

    def files(self) -> Iterator[Tuple[str, bytes]]:
        """Yield (filename, data) pairs, skipping an empty splash."""
        for field, filename in ASSET_FILENAMES.items():
            data = getattr(self, field)
            if field == "splash" and not data:
                continue
            yield filename, data


def hex_to_rgb(value: str) -> RGB:
    m = _HEX_RE.match(value or "")
    if not m:
        raise InvalidColorError(f"invalid hex color: {value!r}")
    return tuple(int(part, 16) for part in m.groups())


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def resize_contain(image: Image.Image, width: int, height: int) -> Image.Image:
    """Fit ``image`` inside width x height without cropping or distortion.

    The result is always exactly width x height RGBA; the leftover area is
    fully transparent and the scaled image sits in the middle.
    """
    src = image if image.mode == "RGBA" else image.convert("RGBA")
    scale = min(width / src.width, height / src.height)
    new_w = max(1, min(width, round_half_up(src.width * scale)))
    new_h = max(1, min(height, round_half_up(src.height * scale)))
    resized = src.resize((new_w, new_h), Image.LANCZOS)

    canvas = Image.new("RGBA", (width, height), TRANSPARENT)
    canvas.paste(resized, ((width - new_w) // 2, (height - new_h) // 2))
    return canvas


def pad_and_center(image: Image.Image, size: int, padding_percent: int = ADAPTIVE_PADDING_PERCENT) -> Image.Image:
    padding = round_half_up(size * padding_percent / 100)
    content = size - padding * 2
    canvas = Image.new("RGBA", (size, size), TRANSPARENT)
    canvas.paste(resize_contain(image, content, content), (padding, padding))
    return canvas


def solid_background(size: int, rgb: RGB) -> Image.Image:
    return Image.new("RGB", (size, size), rgb)


def monochrome(image: Image.Image, size: int) -> Image.Image:
    """White-on-transparent variant; the shape survives only in alpha."""
    contained = resize_contain(image, size, size)
    alpha = contained.getchannel("A")

    grey = ImageOps.autocontrast(ImageOps.grayscale(contained.convert("RGB")))
    white = Image.new("L", grey.size, 255)
    lit = ImageChops.screen(grey, white)

    return Image.merge("RGBA", (lit, lit, lit, alpha))


def splash_screen(image: Image.Image, size: Tuple[int, int], rgb: RGB) -> Image.Image:
    width, height = size
    logo_w = round_half_up(width * SPLASH_LOGO_RATIO)
    logo_h = round_half_up(height * SPLASH_LOGO_RATIO)
    logo = resize_contain(image, logo_w, logo_h)

    canvas = Image.new("RGB", size, rgb)
    left = round_half_up((width - logo_w) / 2)
    top = round_half_up((height - logo_h) / 2)
    canvas.paste(logo, (left, top), logo)
    return canvas


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG", optimize=True)
    return buf.getvalue()


def _load(source: Union[bytes, Image.Image]) -> Image.Image:
    if isinstance(source, Image.Image):
        im = source.copy()
    else:
        im = Image.open(io.BytesIO(source))
    im.load()
    return im.convert("RGBA")


def generate(source: Union[bytes, Image.Image], background_color: str, include_splash: bool) -> OutputBundle:
    """Build every branding asset from a validated source logo.

    ``source`` may be the raw upload bytes or an already decoded image.
    A malformed colour raises InvalidColorError; any other failure raises
    AssetGenerationError and no partial bundle is returned.
    """
    rgb = hex_to_rgb(background_color)

    try:
        src = _load(source)
        logger.debug("Generating assets from %dx%d source, splash=%s", src.width, src.height, include_splash)

        icon = encode_png(resize_contain(src, ICON_SIZE, ICON_SIZE))
        foreground = encode_png(pad_and_center(src, ICON_SIZE))
        background = encode_png(solid_background(ICON_SIZE, rgb))
        mono = encode_png(monochrome(src, ICON_SIZE))
        favicon = encode_png(resize_contain(src, FAVICON_SIZE, FAVICON_SIZE))
        splash = encode_png(splash_screen(src, SPLASH_SIZE, rgb)) if include_splash else b""
    except Exception as e:
        raise AssetGenerationError(f"asset generation failed: {e}") from e

    return OutputBundle(
        icon=icon,
        adaptive_icon_foreground=foreground,
        adaptive_icon_background=background,
        android_icon_monochrome=mono,
        splash=splash,
        favicon=favicon,
    )

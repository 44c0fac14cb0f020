"""Channel layout normalization for decoded images."""

from __future__ import annotations

import logging

from PIL import Image

from .errors import UnsupportedFormatError

logger = logging.getLogger(__name__)

OPAQUE = 255


def to_rgb_or_rgba(image: Image.Image) -> Image.Image:
    """Convert any Pillow mode to RGB, or RGBA when the source carries transparency."""

    if image.mode == "RGBA":
        return image
    if image.mode in ("LA", "PA", "La", "RGBa") or "transparency" in image.info:
        return image.convert("RGBA")
    if image.mode == "RGB":
        return image
    if image.mode == "P":
        return image.convert("RGB")
    if image.mode.startswith("I") or image.mode == "F":
        # 16/32-bit grayscale cannot go straight to RGB
        return image.convert("I").point(lambda v: v * (1 / 256)).convert("L").convert("RGB")
    return image.convert("RGB")


def ensure_alpha(image: Image.Image) -> Image.Image:
    """Return an RGBA image, adding an opaque alpha channel to RGB input.

    The check is by band layout, not just channel count: premultiplied
    ``RGBa`` is unpremultiplied and padded ``RGBX`` gets an opaque alpha, while
    other 4-band layouts such as ``CMYK`` are rejected.
    """

    bands = image.getbands()
    if bands == ("R", "G", "B"):
        result = image.copy()
        result.putalpha(OPAQUE)
        logger.debug("Added opaque alpha channel to %sx%s image", image.width, image.height)
        return result
    if bands == ("R", "G", "B", "A"):
        return image
    if image.mode == "RGBa":
        return image.convert("RGBA")
    if image.mode == "RGBX":
        return ensure_alpha(image.convert("RGB"))
    raise UnsupportedFormatError(
        f"Expected 3 or 4 channels (RGB/RGBA), got {len(bands)} ({image.mode})"
    )

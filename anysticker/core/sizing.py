"""Sticker dimension calculation and resizing."""

from __future__ import annotations

import logging

from PIL import Image

from . import STICKER_SIZE

logger = logging.getLogger(__name__)


def calculate_sticker_size(width: int, height: int, bound: int = STICKER_SIZE) -> tuple[int, int]:
    """Scale so the longer side equals ``bound`` and the shorter keeps the aspect ratio.

    Small sources are enlarged and large sources shrunk by the same rule,
    ``bound / max(width, height)``. The shorter side is rounded to the nearest
    pixel and never drops below one.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    if width >= height:
        target = (bound, _scaled_side(height, width, bound))
    else:
        target = (_scaled_side(width, height, bound), bound)

    logger.debug("Sticker size for %sx%s -> %sx%s", width, height, *target)
    return target


def _scaled_side(short: int, long: int, bound: int) -> int:
    scaled = round(short * bound / long)
    return min(max(scaled, 1), bound)


def resize_for_sticker(image: Image.Image, bound: int = STICKER_SIZE) -> Image.Image:
    """Resize an image to sticker dimensions using Lanczos resampling."""

    target = calculate_sticker_size(image.width, image.height, bound)
    if image.size == target:
        return image
    return image.resize(target, Image.Resampling.LANCZOS)

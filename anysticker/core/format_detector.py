"""Classify source files as static images or animations."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from . import VIDEO_EXTENSIONS

logger = logging.getLogger(__name__)

WEBP_HEADER_SIZE = 21
WEBP_ANIMATION_FLAG = 0x02


class SourceKind(Enum):
    """How a source file has to be decoded."""

    STATIC = "static"
    ANIMATED_GIF = "animated_gif"
    ANIMATED_CONTAINER = "animated_container"

    @property
    def is_animated(self) -> bool:
        return self is not SourceKind.STATIC


def is_animated_webp(path: Path) -> bool:
    """Check the RIFF header for an extended WebP chunk with the animation flag set."""

    try:
        with path.open("rb") as handle:
            header = handle.read(WEBP_HEADER_SIZE)
    except OSError as exc:
        logger.debug("Could not probe %s: %s", path, exc)
        return False

    if len(header) < WEBP_HEADER_SIZE:
        return False
    if header[0:4] != b"RIFF" or header[8:12] != b"WEBP":
        return False
    if header[12:16] != b"VP8X":
        return False
    return bool(header[20] & WEBP_ANIMATION_FLAG)


def classify_source(path: Path) -> SourceKind:
    """Return the decoding strategy for ``path`` based on extension and header."""

    suffix = path.suffix.lower()
    if suffix == ".gif":
        return SourceKind.ANIMATED_GIF
    if suffix == ".webp":
        return SourceKind.ANIMATED_CONTAINER if is_animated_webp(path) else SourceKind.STATIC
    if suffix in VIDEO_EXTENSIONS:
        return SourceKind.ANIMATED_CONTAINER
    return SourceKind.STATIC


def is_video_container(path: Path) -> bool:
    return path.suffix.lower() in VIDEO_EXTENSIONS

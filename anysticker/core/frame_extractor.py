"""First-frame extraction for animated sources (GIF, animated WebP, video clips)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DecodeError
from .format_detector import SourceKind, is_video_container

logger = logging.getLogger(__name__)

# what Pillow raises for truncated, corrupt or unrecognised files
DECODE_FAILURES = (
    UnidentifiedImageError,
    Image.DecompressionBombError,
    OSError,
    EOFError,
    SyntaxError,
    ValueError,
)


def extract_first_frame(path: Path, kind: SourceKind) -> Image.Image:
    """Decode the first frame of an animated source as RGBA."""

    if not path.is_file():
        raise DecodeError(path, reason="File not found")

    if kind is SourceKind.ANIMATED_GIF:
        frame = _read_gif_first_frame(path)
    elif kind is SourceKind.ANIMATED_CONTAINER and is_video_container(path):
        frame = _read_video_first_frame(path)
    elif kind is SourceKind.ANIMATED_CONTAINER:
        frame = _read_container_first_frame(path)
    else:
        raise DecodeError(path, reason=f"Not an animated source ({kind.value})")

    logger.debug("Extracted first frame of %s: %sx%s %s", path, frame.width, frame.height, frame.mode)
    return frame


def palette_to_rgba(
    indices: np.ndarray,
    palette: Sequence[int],
    transparency: Optional[int] = None,
) -> np.ndarray:
    """Map a 2-D array of palette indices to an RGBA pixel array.

    ``palette`` is a flat ``[r, g, b, r, g, b, ...]`` color table. Indices past
    the end of the table fall back to entry 0.
    """

    table = np.asarray(palette, dtype=np.uint8)
    color_count = len(table) // 3
    if color_count == 0:
        raise ValueError("Color table is empty")
    table = table[: color_count * 3].reshape(color_count, 3)

    safe = np.where(indices < color_count, indices, 0)
    rgba = np.empty(indices.shape + (4,), dtype=np.uint8)
    rgba[..., :3] = table[safe]
    rgba[..., 3] = 255
    if transparency is not None:
        rgba[..., 3][indices == transparency] = 0
    return rgba


def _read_gif_first_frame(path: Path) -> Image.Image:
    try:
        with Image.open(path) as gif:
            gif.seek(0)
            gif.load()
            if gif.mode != "P":
                # grayscale and already-expanded frames carry no color table
                return gif.convert("RGBA")

            palette = gif.getpalette()
            indices = np.asarray(gif, dtype=np.uint8)
            transparency = gif.info.get("transparency")
            if not isinstance(transparency, int):
                transparency = None
    except DECODE_FAILURES as exc:
        raise DecodeError(path, reason=str(exc)) from exc

    if not palette:
        raise DecodeError(path, reason="No color table in GIF")
    return Image.fromarray(palette_to_rgba(indices, palette, transparency))


def _read_container_first_frame(path: Path) -> Image.Image:
    try:
        with Image.open(path) as container:
            logger.debug("%s holds %s frame(s)", path, getattr(container, "n_frames", 1))
            container.seek(0)
            return container.convert("RGBA")
    except DECODE_FAILURES as exc:
        raise DecodeError(path, reason=str(exc)) from exc


def _read_video_first_frame(path: Path) -> Image.Image:
    """Read exactly one frame at t=0 through moviepy."""

    clip_class = _resolve_video_file_clip(path)
    _ensure_ffmpeg_available(path)

    clip = None
    try:
        clip = clip_class(str(path), audio=False)
        frame_array = clip.get_frame(0)
    except Exception as exc:  # moviepy surfaces ffmpeg failures as assorted exception types
        raise DecodeError(path, reason=f"Could not read first frame: {exc}") from exc
    finally:
        if clip is not None:
            clip.close()

    if frame_array is None or frame_array.size == 0:
        raise DecodeError(path, reason="No frame could be extracted")
    return Image.fromarray(np.asarray(frame_array, dtype=np.uint8)).convert("RGBA")


def _ensure_ffmpeg_available(path: Path) -> None:
    """Raise a friendly error if ffmpeg is missing."""

    try:
        from moviepy.config import FFMPEG_BINARY  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover
        raise DecodeError(path, reason="moviepy is not installed") from exc

    if not FFMPEG_BINARY:
        raise DecodeError(path, reason="ffmpeg not found. Install ffmpeg and ensure it is on PATH.")


def _resolve_video_file_clip(path: Path):
    """Import VideoFileClip from supported moviepy locations."""

    try:
        from moviepy.editor import VideoFileClip  # type: ignore
        return VideoFileClip
    except ModuleNotFoundError:
        try:
            from moviepy.video.io.VideoFileClip import VideoFileClip  # type: ignore
            return VideoFileClip
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise DecodeError(path, reason="moviepy is not installed") from exc

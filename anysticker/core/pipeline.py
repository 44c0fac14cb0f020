"""Single-file conversion: decode, normalize, resize, encode."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from . import PNG_COMPRESS_LEVEL, OutputFormat, ProcessingOptions
from .errors import DecodeError, EncodeError, OutputIOError
from .format_detector import SourceKind, classify_source
from .frame_extractor import DECODE_FAILURES, extract_first_frame
from .normalizer import ensure_alpha, to_rgb_or_rgba
from .sizing import resize_for_sticker
from ..utils import file_tools

logger = logging.getLogger(__name__)


def load_image(path: Path) -> Image.Image:
    """Decode a static image as RGB or RGBA."""

    if not path.is_file():
        raise DecodeError(path, reason="File not found")
    try:
        with Image.open(path) as source:
            source.load()
            image = to_rgb_or_rgba(source.copy())
    except DECODE_FAILURES as exc:
        raise DecodeError(path, reason=str(exc)) from exc

    logger.debug("Read %s: %sx%s, %s channel(s)", path, image.width, image.height, len(image.getbands()))
    return image


def save_sticker(image: Image.Image, path: Path, options: ProcessingOptions) -> Path:
    """Encode ``image`` in the requested format and write it to ``path``."""

    file_tools.ensure_directory(path.parent)
    output_format = options.output_format
    if output_format is OutputFormat.WEBP:
        params = {"quality": options.quality}
    else:
        params = {"compress_level": PNG_COMPRESS_LEVEL}

    buffer = io.BytesIO()
    try:
        image.save(buffer, format=output_format.pillow_format, **params)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodeError(path, reason=str(exc)) from exc

    try:
        path.write_bytes(buffer.getvalue())
    except OSError as exc:
        raise OutputIOError(path, reason=exc.strerror or str(exc)) from exc

    logger.info("Wrote sticker to %s", path)
    return path


def process_image(input_path: Path, output_path: Path, options: ProcessingOptions) -> Path:
    """Convert a static image into a sticker."""

    image = load_image(input_path)
    return _finish(image, output_path, options)


def process_animation(
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    kind: SourceKind = SourceKind.ANIMATED_GIF,
) -> Path:
    """Convert the first frame of an animated source into a sticker."""

    frame = extract_first_frame(input_path, kind)
    return _finish(frame, output_path, options)


def process_file(
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    kind: Optional[SourceKind] = None,
) -> Path:
    """Route a source to the static or animated pipeline."""

    if kind is None:
        kind = classify_source(input_path)
    if options.remove_background:
        logger.warning("Background removal is not supported; keeping the original background")

    if kind.is_animated:
        logger.info("Detected animated source %s, using its first frame", input_path.name)
        return process_animation(input_path, output_path, options, kind)
    return process_image(input_path, output_path, options)


def _finish(image: Image.Image, output_path: Path, options: ProcessingOptions) -> Path:
    sticker = resize_for_sticker(ensure_alpha(image))
    logger.debug("Resized %sx%s -> %sx%s", image.width, image.height, sticker.width, sticker.height)
    return save_sticker(sticker, output_path, options)

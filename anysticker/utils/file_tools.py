"""Filesystem helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core import DEFAULT_OUTPUT_NAME, OutputFormat
from ..core.errors import OutputIOError

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> Path:
    """Create a directory if it does not exist."""

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputIOError(path, reason=exc.strerror or str(exc)) from exc
    logger.debug("Ensured directory exists: %s", path)
    return path


def default_output_path(output_format: OutputFormat) -> Path:
    """Return the single-file output used when ``-o`` is not given."""

    return Path(DEFAULT_OUTPUT_NAME).with_suffix(output_format.suffix)


def with_format_suffix(path: Path, output_format: OutputFormat) -> Path:
    """Append the format suffix to ``path`` when it has none."""

    if path.suffix:
        if path.suffix.lower() != output_format.suffix:
            logger.warning(
                "Output %s does not end in %s; writing %s data anyway",
                path,
                output_format.suffix,
                output_format.pillow_format,
            )
        return path
    return path.with_name(path.name + output_format.suffix)


def batch_output_path(input_path: Path, output_dir: Path, output_format: OutputFormat) -> Path:
    """Map a source file to its sticker path inside ``output_dir``."""

    return output_dir / f"{input_path.stem}{output_format.suffix}"

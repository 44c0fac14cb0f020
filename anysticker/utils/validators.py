"""Validation helpers for user inputs."""

from __future__ import annotations

import argparse
from pathlib import Path

from ..core.errors import ArgumentError

MIN_QUALITY = 1
MAX_QUALITY = 100


def clamp_quality(value: int) -> int:
    """Clamp an encoder quality into the 1-100 range."""

    return max(MIN_QUALITY, min(MAX_QUALITY, value))


def parse_quality(value: str) -> int:
    """argparse ``type=`` callback accepting any integer and clamping it."""

    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"quality must be an integer, got {value!r}") from exc
    return clamp_quality(parsed)


def validate_input_path(path: Path | None) -> Path:
    """Ensure an input path was provided; existence is checked by the decoder."""

    if path is None or str(path).strip() == "":
        raise ArgumentError("No input path provided")
    return path


def validate_output_dir(path: Path) -> Path:
    """Reject a batch output location that is an existing regular file."""

    if path.exists() and not path.is_dir():
        raise ArgumentError(f"Output path {path} exists and is not a directory")
    return path

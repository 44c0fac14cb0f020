"""Directory listing filtered by a simple ``*`` / ``*.ext`` pattern."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MATCH_ALL = "*"


def pattern_extension(pattern: str) -> Optional[str]:
    """Return the lowercase ``.ext`` of a ``*.ext`` pattern, or None if unsupported."""

    if len(pattern) > 2 and pattern.startswith("*.") and not any(c in pattern[2:] for c in "*?[]/\\"):
        return pattern[1:].lower()
    return None


def list_matching_files(directory: Path, pattern: str = MATCH_ALL) -> list[Path]:
    """Return sorted regular files in ``directory`` whose name matches ``pattern``.

    Only ``*`` (every file) and ``*.ext`` (case-insensitive extension) are
    understood; any other pattern matches nothing. Subdirectories are not
    descended into.
    """

    if not directory.is_dir():
        logger.warning("Input directory does not exist: %s", directory)
        return []

    if pattern == MATCH_ALL:
        extension = None
    else:
        extension = pattern_extension(pattern)
        if extension is None:
            logger.warning("Unsupported pattern %r, expected '*' or '*.ext'", pattern)
            return []

    matches = [
        entry
        for entry in directory.iterdir()
        if entry.is_file() and (extension is None or entry.suffix.lower() == extension)
    ]
    return sorted(matches)

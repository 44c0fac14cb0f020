"""Batch conversion of every matching file in a directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

from . import ProcessingOptions, ProcessingResult
from .file_matcher import list_matching_files
from .format_detector import classify_source
from .pipeline import process_file
from ..utils import file_tools

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, Path], None]


@dataclass(frozen=True)
class BatchSummary:
    """Counts reported at the end of a batch run."""

    total: int
    succeeded: int
    failed: int


def process_directory(
    input_dir: Path,
    output_dir: Path,
    options: ProcessingOptions,
    progress: Optional[ProgressCallback] = None,
) -> list[ProcessingResult]:
    """Convert every file in ``input_dir`` matching ``options.pattern``.

    The output directory is created before anything else; if that fails the
    whole batch fails with :class:`~anysticker.core.errors.OutputIOError`.
    Per-file failures never stop the batch, they are recorded in the
    returned results instead.
    """

    file_tools.ensure_directory(output_dir)

    files = list_matching_files(input_dir, options.pattern)
    if not files:
        logger.warning("No files in %s match %r", input_dir, options.pattern)
        return []

    results: list[ProcessingResult] = []
    claimed: dict[Path, Path] = {}
    total = len(files)
    for index, input_path in enumerate(files, start=1):
        output_path = file_tools.batch_output_path(input_path, output_dir, options.output_format)
        if output_path in claimed:
            logger.warning(
                "%s and %s both map to %s; the later file overwrites it",
                claimed[output_path].name,
                input_path.name,
                output_path,
            )
        claimed[output_path] = input_path

        if progress:
            progress(index, total, input_path)
        results.append(_process_one(input_path, output_path, options))

    summary = summarize(results)
    logger.info("Batch finished: %s ok, %s failed", summary.succeeded, summary.failed)
    return results


def summarize(results: Iterable[ProcessingResult]) -> BatchSummary:
    """Count successes and failures."""

    total = 0
    succeeded = 0
    for result in results:
        total += 1
        if result.success:
            succeeded += 1
    return BatchSummary(total=total, succeeded=succeeded, failed=total - succeeded)


def _process_one(input_path: Path, output_path: Path, options: ProcessingOptions) -> ProcessingResult:
    try:
        kind = classify_source(input_path)
        process_file(input_path, output_path, options, kind)
    except Exception as exc:  # one bad file must not abort the batch
        logger.debug("Processing %s failed", input_path, exc_info=True)
        return ProcessingResult(
            input_path=input_path,
            output_path=output_path,
            success=False,
            error=str(exc) or exc.__class__.__name__,
            error_kind=exc.__class__.__name__,
        )
    return ProcessingResult(input_path=input_path, output_path=output_path, success=True)

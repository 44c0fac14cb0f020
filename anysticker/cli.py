"""Command-line entry point for sticker conversion."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .core import (
    DEFAULT_OUTPUT_NAME,
    DEFAULT_QUALITY,
    CommandLineArgs,
    OutputFormat,
    ProcessingOptions,
    ProcessingResult,
)
from .core import batch, format_detector, pipeline
from .core.errors import AnyStickerError, ArgumentError
from .utils import file_tools, validators

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ANYSTICKER_LOG_LEVEL"

EPILOG = """\
examples:
  anysticker input.jpg
  anysticker input.gif -o sticker.webp --lossy -q 90
  anysticker ./images -o ./stickers --lossy -p "*.jpg"
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="anysticker",
        description="Convert an image, animation or directory of them into 512px stickers.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", type=Path, help="Source file, or a directory for batch mode")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file (single mode) or directory (batch mode) (default: output)",
    )
    parser.add_argument(
        "--lossy",
        "--webp",
        dest="lossy",
        action="store_true",
        help="Write lossy WEBP instead of PNG",
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=validators.parse_quality,
        default=DEFAULT_QUALITY,
        help="WEBP quality, clamped to 1-100 (default: 100)",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        default="*",
        help="File pattern for batch mode, '*' or '*.ext' (default: *)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_args(argv: list[str] | None = None) -> CommandLineArgs:
    """Parse ``argv`` into a :class:`CommandLineArgs`, deriving batch mode and output path."""

    parsed = build_parser().parse_args(argv)
    input_path = validators.validate_input_path(parsed.input)
    is_batch_mode = input_path.is_dir()

    output_format = OutputFormat.WEBP if parsed.lossy else OutputFormat.PNG
    options = ProcessingOptions(
        output_format=output_format,
        quality=parsed.quality,
        pattern=parsed.pattern,
    )

    if not is_batch_mode and parsed.pattern != "*":
        logger.warning("-p only applies when the input is a directory; ignoring %r", parsed.pattern)

    if is_batch_mode:
        output_path = validators.validate_output_dir(parsed.output or Path(DEFAULT_OUTPUT_NAME))
    elif parsed.output is None:
        output_path = file_tools.default_output_path(output_format)
    else:
        output_path = file_tools.with_format_suffix(parsed.output, output_format)

    return CommandLineArgs(
        input_path=input_path,
        output_path=output_path,
        options=options,
        is_batch_mode=is_batch_mode,
        verbose=parsed.verbose,
    )


def configure_logging(verbose: bool = False) -> None:
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def run_single(args: CommandLineArgs) -> int:
    kind = format_detector.classify_source(args.input_path)
    if kind.is_animated:
        print("Detected animated file, extracting the first frame as sticker")
    pipeline.process_file(args.input_path, args.output_path, args.options, kind)
    print(f"Processing completed! Output file: {args.output_path}")
    return 0


def run_batch(args: CommandLineArgs) -> int:
    def report_progress(index: int, total: int, path: Path) -> None:
        print(f"[{index}/{total}] Processing {path.name}")

    results = batch.process_directory(
        args.input_path, args.output_path, args.options, progress=report_progress
    )
    _print_failures(results)

    summary = batch.summarize(results)
    if summary.total == 0:
        print(f"No files matching {args.options.pattern!r} found in {args.input_path}")
    print(
        "\nProcessing completed!\n"
        f"Total: {summary.total} files\n"
        f"Success: {summary.succeeded} files\n"
        f"Failed: {summary.failed} files\n"
        f"Output directory: {args.output_path}"
    )
    return 0


def _print_failures(results: list[ProcessingResult]) -> None:
    for result in results:
        if result.failed:
            print(f"Processing failed: {result.input_path} - {result.error}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parse_args(argv)
    except ArgumentError as exc:
        parser.print_usage(sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    configure_logging(args.verbose)
    try:
        if args.is_batch_mode:
            return run_batch(args)
        return run_single(args)
    except (AnyStickerError, OSError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

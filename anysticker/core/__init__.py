"""Core data model for sticker conversion."""

__all__ = [
    "OutputFormat",
    "ProcessingOptions",
    "ProcessingResult",
    "CommandLineArgs",
    "STICKER_SIZE",
    "DEFAULT_QUALITY",
    "PNG_COMPRESS_LEVEL",
    "DEFAULT_OUTPUT_NAME",
    "VIDEO_EXTENSIONS",
]

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

STICKER_SIZE = 512
DEFAULT_QUALITY = 100
PNG_COMPRESS_LEVEL = 9
DEFAULT_OUTPUT_NAME = "output"
VIDEO_EXTENSIONS = {".mp4", ".mov", ".avi", ".mkv", ".webm"}


class OutputFormat(Enum):
    """Encodings a sticker can be written in."""

    PNG = "png"
    WEBP = "webp"

    @property
    def suffix(self) -> str:
        return f".{self.value}"

    @property
    def pillow_format(self) -> str:
        return self.value.upper()

    @property
    def is_lossy(self) -> bool:
        return self is OutputFormat.WEBP


@dataclass(frozen=True)
class ProcessingOptions:
    """User-configurable settings shared by every file of one invocation."""

    output_format: OutputFormat = OutputFormat.PNG
    preserve_aspect_ratio: bool = True
    remove_background: bool = False
    quality: int = DEFAULT_QUALITY
    pattern: str = "*"


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of converting one file in batch mode."""

    input_path: Path
    output_path: Path
    success: bool
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def failed(self) -> bool:
        return not self.success


@dataclass(frozen=True)
class CommandLineArgs:
    """Parsed command line for one run."""

    input_path: Path
    output_path: Path
    options: ProcessingOptions = field(default_factory=ProcessingOptions)
    is_batch_mode: bool = False
    verbose: bool = False

"""Domain-specific exceptions for sticker conversion."""

from pathlib import Path


class AnyStickerError(Exception):
    """Base class for every error raised by the converter."""


class ArgumentError(AnyStickerError, ValueError):
    """Raised when command-line arguments are missing or invalid."""


class DecodeError(AnyStickerError, ValueError):
    """Raised when a source file is missing, unreadable or corrupt."""

    def __init__(self, path: Path, reason: str | None = None):
        self.path = path
        self.reason = reason
        message = f"Cannot decode {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EncodeError(AnyStickerError, RuntimeError):
    """Raised when the encoder rejects an image."""

    def __init__(self, path: Path, reason: str | None = None):
        self.path = path
        message = f"Cannot encode {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class OutputIOError(AnyStickerError, OSError):
    """Raised when an output file or directory cannot be written."""

    def __init__(self, path: Path, reason: str | None = None):
        self.path = path
        message = f"Cannot write {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnsupportedFormatError(AnyStickerError, ValueError):
    """Raised when a decoded image has an unexpected channel layout."""

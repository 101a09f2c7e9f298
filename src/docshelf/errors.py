"""Exceptions raised by DocShelf."""

from pathlib import Path


class DocShelfError(Exception):
    """Base class for all DocShelf errors."""


class UnsupportedFormatError(DocShelfError):
    """The file is a binary format we cannot decode as text."""

    def __init__(self, mime_type: str, message: str | None = None):
        self.mime_type = mime_type
        super().__init__(message or f"Unsupported document type: {mime_type}")


class ReadFailureError(DocShelfError):
    """Reading the source bytes failed."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.path = str(path)
        detail = f": {reason}" if reason else ""
        super().__init__(f"Failed to read {self.path}{detail}")


class CorruptStoreError(DocShelfError):
    """The persisted document collection could not be decoded."""

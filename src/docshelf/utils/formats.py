"""MIME type helpers for ingestion."""

import mimetypes
from pathlib import Path

DEFAULT_MIME_TYPE = "text/plain"

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Binary document formats we have no text decoder for yet
UNSUPPORTED_MIME_TYPES = {
    PDF_MIME_TYPE: "PDF parsing not yet implemented. Please convert to text first.",
    DOCX_MIME_TYPE: "DOCX parsing not yet implemented. Please convert to text first.",
}

# Other types that never hold decodable text
BINARY_MIME_TYPES = {
    "application/octet-stream",
    "application/zip",
    "application/gzip",
    "application/x-tar",
    "application/x-7z-compressed",
    "application/x-rar-compressed",
    "application/msword",
    "application/vnd.ms-excel",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "application/vnd.sqlite3",
    "application/x-sqlite3",
    "application/wasm",
    "application/x-executable",
}
BINARY_MIME_PREFIXES = ("image/", "audio/", "video/", "font/")
TEXT_IMAGE_TYPES = {"image/svg+xml"}

# Extensions mimetypes does not know on every platform
_EXTRA_TYPES = {
    ".md": "text/markdown",
    ".markdown": "text/markdown",
    ".jsonl": "application/jsonl",
    ".toml": "application/toml",
    ".yaml": "application/yaml",
    ".yml": "application/yaml",
}


def guess_mime_type(path: str | Path) -> str:
    """Guess a MIME type from a filename, defaulting to text/plain."""
    suffix = Path(path).suffix.lower()
    if suffix in _EXTRA_TYPES:
        return _EXTRA_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type or DEFAULT_MIME_TYPE


def unsupported_reason(mime_type: str) -> str | None:
    """Return why a MIME type cannot be ingested, or None if it can."""
    normalized = mime_type.split(";", 1)[0].strip().lower()
    if normalized in UNSUPPORTED_MIME_TYPES:
        return UNSUPPORTED_MIME_TYPES[normalized]
    if normalized in TEXT_IMAGE_TYPES:
        return None
    if normalized in BINARY_MIME_TYPES or normalized.startswith(BINARY_MIME_PREFIXES):
        return f"{normalized} is a binary format and cannot be read as text."
    return None

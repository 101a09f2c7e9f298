"""Utility functions for DocShelf."""

from docshelf.utils.binary import detect_binary, is_binary_content
from docshelf.utils.formats import guess_mime_type, unsupported_reason

__all__ = ["detect_binary", "is_binary_content", "guess_mime_type", "unsupported_reason"]

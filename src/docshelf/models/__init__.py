"""Data models for DocShelf."""

from docshelf.models.document import Document, ScoredChunk, SourceFile, StoreStats

__all__ = ["Document", "ScoredChunk", "SourceFile", "StoreStats"]

"""DocShelf - keyword retrieval over user-supplied documents for LLM prompts."""

from docshelf.chunkers import SentenceChunker
from docshelf.engine import RAGEngine
from docshelf.errors import (
    CorruptStoreError,
    DocShelfError,
    ReadFailureError,
    UnsupportedFormatError,
)
from docshelf.models import Document, ScoredChunk, SourceFile, StoreStats
from docshelf.retrieval import KeywordRetriever, enhance_message, format_context
from docshelf.storage import DocumentStore, MemoryBackend, SQLiteBackend

__version__ = "0.1.0"

__all__ = [
    "Document",
    "ScoredChunk",
    "SourceFile",
    "StoreStats",
    "SentenceChunker",
    "DocumentStore",
    "MemoryBackend",
    "SQLiteBackend",
    "KeywordRetriever",
    "RAGEngine",
    "format_context",
    "enhance_message",
    "DocShelfError",
    "UnsupportedFormatError",
    "ReadFailureError",
    "CorruptStoreError",
]

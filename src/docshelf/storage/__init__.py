"""Document storage and persistence backends."""

from docshelf.storage.document_store import DEFAULT_STORAGE_KEY, DocumentStore
from docshelf.storage.memory_backend import MemoryBackend
from docshelf.storage.sqlite_backend import SQLiteBackend

__all__ = ["DocumentStore", "MemoryBackend", "SQLiteBackend", "DEFAULT_STORAGE_KEY"]

"""Shared fixtures for DocShelf tests."""

from __future__ import annotations

import pytest

from docshelf.chunkers import SentenceChunker
from docshelf.engine import RAGEngine
from docshelf.models import Document
from docshelf.storage import DocumentStore, MemoryBackend


def make_document(doc_id: str, chunks: list[str], name: str | None = None, active: bool = True) -> Document:
    """Build a Document directly from chunk strings."""
    content = " ".join(chunks)
    return Document(
        id=doc_id,
        name=name or f"{doc_id}.txt",
        mime_type="text/plain",
        size_bytes=len(content.encode("utf-8")),
        content=content,
        chunks=tuple(chunks),
        active=active,
    )


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> DocumentStore:
    return DocumentStore(backend)


@pytest.fixture
def engine(store: DocumentStore) -> RAGEngine:
    return RAGEngine(store)


@pytest.fixture
def small_chunk_store(backend: MemoryBackend) -> DocumentStore:
    """Store whose chunker makes one chunk per short sentence."""
    return DocumentStore(backend, chunker=SentenceChunker(chunk_size=15, overlap_chars=0))

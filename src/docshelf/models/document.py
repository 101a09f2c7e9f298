"""Core data models for documents and retrieval results."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class SourceFile:
    """Raw ingestion input: file bytes plus the name and MIME type they came with."""

    name: str
    mime_type: str
    data: bytes


@dataclass
class Document:
    """A unit of ingested knowledge.

    Everything except ``active`` is fixed at ingestion time.
    """

    id: str
    name: str
    mime_type: str
    size_bytes: int
    content: str
    chunks: tuple[str, ...] = ()
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    active: bool = True


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk matched by a query, with its keyword score."""

    document_id: str
    document_name: str
    chunk_text: str
    chunk_index: int
    score: int


@dataclass(frozen=True)
class StoreStats:
    """Aggregate counters over a document collection."""

    total: int
    active: int
    total_size_bytes: int
    total_chunks: int

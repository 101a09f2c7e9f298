"""Retrieval facade used by chat callers."""

from __future__ import annotations

import logging
from typing import Sequence

from docshelf.chunkers import SentenceChunker
from docshelf.config import DocShelfSettings
from docshelf.models import ScoredChunk
from docshelf.protocols import RetrievalStrategy
from docshelf.retrieval import KeywordRetriever, enhance_message, format_context
from docshelf.storage import DocumentStore, SQLiteBackend

logger = logging.getLogger(__name__)


class RAGEngine:
    """Ties a DocumentStore to a retriever and the context formatter."""

    def __init__(
        self,
        store: DocumentStore,
        retriever: RetrievalStrategy | None = None,
        top_k: int = 3,
    ):
        self.store = store
        self.retriever = retriever or KeywordRetriever()
        self.top_k = top_k

    @classmethod
    def from_settings(cls, settings: DocShelfSettings) -> "RAGEngine":
        """Build an engine backed by the SQLite file named in settings."""
        chunker = SentenceChunker(
            chunk_size=settings.chunk_size,
            overlap_chars=settings.chunk_overlap,
        )
        store = DocumentStore(
            SQLiteBackend(settings.store_path),
            chunker=chunker,
            key=settings.storage_key,
        )
        return cls(store, top_k=settings.top_k)

    def retrieve_context(self, query: str, top_k: int | None = None) -> list[ScoredChunk]:
        """Rank chunks of the active documents against a query."""
        k = self.top_k if top_k is None else top_k
        results = self.retriever.retrieve(query, self.store.get_active_documents(), k)
        logger.debug(f"Query {query!r} matched {len(results)} chunks")
        return results

    def format_context(self, chunks: Sequence[ScoredChunk]) -> str:
        return format_context(chunks)

    def enhance_message(self, message: str, top_k: int | None = None) -> str:
        """Prepend relevant context to a user message.

        The message comes back unchanged when nothing matches.
        """
        context = self.format_context(self.retrieve_context(message, top_k))
        return enhance_message(context, message)

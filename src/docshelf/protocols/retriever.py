"""Protocol for chunk retrieval strategies."""

from typing import Protocol, Sequence, runtime_checkable

from docshelf.models import Document, ScoredChunk


@runtime_checkable
class RetrievalStrategy(Protocol):
    """Protocol for ranking document chunks against a query.

    The default is plain keyword counting; a BM25 or vector backend
    could be swapped in without touching the engine.
    """

    def retrieve(
        self, query: str, documents: Sequence[Document], top_k: int = 3
    ) -> list[ScoredChunk]:
        """Return at most top_k chunks, best first."""
        ...

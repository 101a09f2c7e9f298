"""Keyword-count retrieval over document chunks."""

from typing import Sequence

from docshelf.models import Document, ScoredChunk

MIN_TOKEN_LENGTH = 3


def tokenize(query: str) -> list[str]:
    """Lowercase, split on whitespace, drop tokens shorter than 3 characters."""
    return [t for t in query.lower().split() if len(t) >= MIN_TOKEN_LENGTH]


def score_chunk(chunk_text: str, tokens: Sequence[str]) -> int:
    """Sum of non-overlapping occurrences of each token in the chunk."""
    chunk_lower = chunk_text.lower()
    return sum(chunk_lower.count(token) for token in tokens)


class KeywordRetriever:
    """Ranks chunks by raw query-term counts.

    No length normalization or term weighting: a chunk's score is simply
    how many times the query terms occur in it. Ties keep document order,
    then chunk order.
    """

    def retrieve(
        self, query: str, documents: Sequence[Document], top_k: int = 3
    ) -> list[ScoredChunk]:
        """Score every chunk of the given documents and return the best.

        Args:
            query: Free-text query
            documents: Documents to search (callers pass the active ones)
            top_k: Maximum number of results

        Returns:
            Up to top_k ScoredChunks with score > 0, highest score first
        """
        tokens = tokenize(query)
        if not documents or not tokens or top_k <= 0:
            return []

        scored: list[ScoredChunk] = []
        for doc in documents:
            for index, chunk_text in enumerate(doc.chunks):
                score = score_chunk(chunk_text, tokens)
                if score > 0:
                    scored.append(
                        ScoredChunk(
                            document_id=doc.id,
                            document_name=doc.name,
                            chunk_text=chunk_text,
                            chunk_index=index,
                            score=score,
                        )
                    )

        # sorted() is stable, so equal scores stay in emission order
        scored = sorted(scored, key=lambda c: c.score, reverse=True)
        return scored[:top_k]

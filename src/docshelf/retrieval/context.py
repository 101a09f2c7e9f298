"""Render ranked chunks as a context block for an LLM prompt."""

from typing import Sequence

from docshelf.models import ScoredChunk

CONTEXT_HEADER = "=== RELEVANT DOCUMENT CONTEXT ===\n"
CONTEXT_FOOTER = "\n=== END CONTEXT ===\n\n"
CHUNK_SEPARATOR = "\n\n---\n\n"
QUERY_PREFIX = "User Query: "


def format_chunk(chunk: ScoredChunk) -> str:
    """Render one chunk with its 1-based source label."""
    return (
        f"[Source: {chunk.document_name}, Chunk {chunk.chunk_index + 1}]\n"
        f"{chunk.chunk_text}"
    )


def format_context(chunks: Sequence[ScoredChunk]) -> str:
    """Join chunks between a header and footer, in the order given.

    Returns an empty string when there are no chunks.
    """
    if not chunks:
        return ""
    body = CHUNK_SEPARATOR.join(format_chunk(c) for c in chunks)
    return CONTEXT_HEADER + body + CONTEXT_FOOTER


def enhance_message(context: str, message: str) -> str:
    """Prefix a user message with retrieved context, if there is any."""
    if not context:
        return message
    return context + QUERY_PREFIX + message

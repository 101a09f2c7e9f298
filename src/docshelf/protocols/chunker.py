"""Protocol for text chunking strategies."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for text chunking strategies.

    A strategy turns a document's full text into an ordered list of chunk
    strings. Chunk order must follow the order of the text.
    """

    def chunk(self, text: str) -> list[str]:
        """Split text into ordered chunks."""
        ...

"""Protocol for input source handlers."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from docshelf.models import SourceFile


@runtime_checkable
class Ingester(Protocol):
    """Protocol for input source handlers.

    Implementations handle different input shapes (single file, folder, zip).
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[SourceFile]:
        """Yield raw source files found in the source.

        Format checks are left to the document store.
        """
        ...

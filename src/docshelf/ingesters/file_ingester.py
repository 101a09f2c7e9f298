"""Ingester for a single file."""

from pathlib import Path
from typing import Iterator

from docshelf.errors import ReadFailureError
from docshelf.models import SourceFile
from docshelf.utils import guess_mime_type


class FileIngester:
    """Ingester for one regular file."""

    source_type = "file"

    def can_handle(self, source: Path) -> bool:
        return source.is_file()

    def ingest(self, source: Path) -> Iterator[SourceFile]:
        """Yield the file itself.

        Raises:
            ReadFailureError: If the file cannot be read
        """
        try:
            data = source.read_bytes()
        except OSError as e:
            raise ReadFailureError(source, e.strerror or str(e)) from e

        yield SourceFile(name=source.name, mime_type=guess_mime_type(source), data=data)

"""Ingester for ZIP archive files."""

import logging
import zipfile
import zlib
from pathlib import Path
from typing import Iterator

from docshelf.errors import ReadFailureError
from docshelf.models import SourceFile
from docshelf.utils import detect_binary, guess_mime_type

logger = logging.getLogger(__name__)

# Corrupt, encrypted or unsupported-compression archives
_ARCHIVE_ERRORS = (zipfile.BadZipFile, zlib.error, OSError, RuntimeError)


class ZipIngester:
    """Ingester for ZIP archive files."""

    source_type = "zip"

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.is_file()

    def ingest(self, source: Path) -> Iterator[SourceFile]:
        """Yield every text member of a ZIP archive.

        Binary members are logged and skipped.

        Raises:
            ReadFailureError: If the archive or one of its members cannot be read
        """
        try:
            zf = zipfile.ZipFile(source, "r")
        except _ARCHIVE_ERRORS as e:
            raise ReadFailureError(source, str(e)) from e

        with zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue

                try:
                    data = zf.read(info)
                except _ARCHIVE_ERRORS as e:
                    raise ReadFailureError(f"{source}:{info.filename}", str(e)) from e

                if detect_binary(info.filename, data):
                    logger.info(f"Skipping binary file {info.filename}")
                    continue

                yield SourceFile(
                    name=info.filename,
                    mime_type=guess_mime_type(info.filename),
                    data=data,
                )

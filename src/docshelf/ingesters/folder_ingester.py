"""Ingester for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from docshelf.models import SourceFile
from docshelf.utils import detect_binary, guess_mime_type

logger = logging.getLogger(__name__)

# Build artifacts and version control directories
SKIP_DIRS = {
    "__pycache__",
    "node_modules",
    "venv",
    "env",
    "dist",
    "build",
}


class FolderIngester:
    """Ingester for local filesystem folders."""

    source_type = "folder"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[SourceFile]:
        """Yield files from a folder recursively, in sorted order.

        Unreadable and binary files are logged and skipped.
        """
        for root, dirs, files in os.walk(source):
            dirs[:] = sorted(d for d in dirs if not self._should_skip(d))
            for filename in sorted(files):
                if self._should_skip(filename):
                    continue

                full_path = Path(root) / filename
                rel_path = full_path.relative_to(source)

                try:
                    data = full_path.read_bytes()
                except OSError as e:
                    logger.warning(f"Skipping unreadable file {rel_path}: {e}")
                    continue

                if detect_binary(rel_path, data):
                    logger.info(f"Skipping binary file {rel_path}")
                    continue

                yield SourceFile(
                    name=rel_path.as_posix(),
                    mime_type=guess_mime_type(full_path),
                    data=data,
                )

    def _should_skip(self, name: str) -> bool:
        """Skip hidden entries, egg-info and common build artifacts."""
        return name.startswith(".") or name.endswith(".egg-info") or name in SKIP_DIRS

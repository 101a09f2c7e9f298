"""Input source handlers (ingesters) for DocShelf."""

from pathlib import Path
from typing import Optional

from docshelf.ingesters.file_ingester import FileIngester
from docshelf.ingesters.folder_ingester import FolderIngester
from docshelf.ingesters.zip_ingester import ZipIngester
from docshelf.protocols import Ingester

# Registry of available ingesters, checked in order
_INGESTERS: list[Ingester] = [
    ZipIngester(),
    FolderIngester(),
    FileIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to a file, folder or zip archive

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


__all__ = [
    "get_ingester",
    "FileIngester",
    "FolderIngester",
    "ZipIngester",
]

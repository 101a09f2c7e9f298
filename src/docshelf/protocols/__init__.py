"""Protocol definitions for extensible components."""

from docshelf.protocols.backend import PersistenceBackend
from docshelf.protocols.chunker import ChunkingStrategy
from docshelf.protocols.ingester import Ingester
from docshelf.protocols.retriever import RetrievalStrategy

__all__ = ["Ingester", "ChunkingStrategy", "PersistenceBackend", "RetrievalStrategy"]

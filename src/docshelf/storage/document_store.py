"""Document collection with write-through persistence and change listeners."""

import logging
import threading
import uuid
from pathlib import Path
from typing import Callable, Optional

from docshelf.chunkers import SentenceChunker
from docshelf.errors import ReadFailureError, UnsupportedFormatError
from docshelf.models import Document, SourceFile, StoreStats
from docshelf.protocols import ChunkingStrategy, PersistenceBackend
from docshelf.storage.codec import decode_documents, encode_documents
from docshelf.utils import guess_mime_type, is_binary_content, unsupported_reason

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "rag.documents"

Listener = Callable[[list[Document]], None]


class DocumentStore:
    """Owns the document collection.

    Every mutation overwrites the persisted collection before returning,
    then notifies listeners with the current document list.
    """

    def __init__(
        self,
        backend: PersistenceBackend,
        chunker: ChunkingStrategy | None = None,
        key: str = DEFAULT_STORAGE_KEY,
    ):
        self.backend = backend
        self.chunker = chunker or SentenceChunker()
        self.key = key
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._documents: list[Document] = self._load()

    def _load(self) -> list[Document]:
        data = self.backend.load(self.key)
        if data is None:
            return []
        documents = decode_documents(data)
        logger.debug(f"Restored {len(documents)} documents from {self.key!r}")
        return documents

    def _persist(self) -> None:
        self.backend.save(self.key, encode_documents(self._documents))

    # Ingestion

    def add_document(self, data: bytes, name: str, mime_type: str) -> Document:
        """Decode, chunk and store a document.

        Args:
            data: Raw file bytes
            name: Original filename
            mime_type: MIME type reported for the file

        Returns:
            The stored Document

        Raises:
            UnsupportedFormatError: For binary types or content with no text decoder
        """
        reason = unsupported_reason(mime_type)
        if reason is not None:
            raise UnsupportedFormatError(mime_type, reason)
        if is_binary_content(data):
            raise UnsupportedFormatError(
                mime_type, f"{name} looks like a binary file and cannot be read as text."
            )

        content = data.decode("utf-8", errors="replace")
        document = Document(
            id=f"doc_{uuid.uuid4().hex}",
            name=name,
            mime_type=mime_type,
            size_bytes=len(data),
            content=content,
            chunks=tuple(self.chunker.chunk(content)),
        )

        with self._lock:
            self._documents.append(document)
            try:
                self._persist()
            except Exception:
                self._documents.pop()
                raise
            logger.info(f"Added {name} ({len(document.chunks)} chunks)")
            self.notify_listeners()

        return document

    def add_source(self, source: SourceFile) -> Document:
        """Store a SourceFile produced by an ingester."""
        return self.add_document(source.data, source.name, source.mime_type)

    def add_file(self, path: Path | str, mime_type: str | None = None) -> Document:
        """Read a file from disk and store it.

        Raises:
            ReadFailureError: If the file cannot be read
            UnsupportedFormatError: For binary formats with no text decoder
        """
        file_path = Path(path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise ReadFailureError(file_path, e.strerror or str(e)) from e
        return self.add_document(
            data, file_path.name, mime_type or guess_mime_type(file_path)
        )

    # Mutation

    def remove_document(self, doc_id: str) -> None:
        """Remove a document. Unknown ids are ignored."""
        with self._lock:
            before = self._documents
            self._documents = [d for d in before if d.id != doc_id]
            try:
                self._persist()
            except Exception:
                self._documents = before
                raise
            if len(self._documents) != len(before):
                logger.info(f"Removed {doc_id}")
            self.notify_listeners()

    def toggle_document(self, doc_id: str) -> Optional[Document]:
        """Flip a document's active flag. Returns None for unknown ids."""
        with self._lock:
            doc = self.get_document(doc_id)
            if doc is None:
                return None
            doc.active = not doc.active
            try:
                self._persist()
            except Exception:
                doc.active = not doc.active
                raise
            logger.debug(f"{doc_id} active={doc.active}")
            self.notify_listeners()
            return doc

    def clear_all(self) -> None:
        """Remove every document."""
        with self._lock:
            before = self._documents
            self._documents = []
            try:
                self._persist()
            except Exception:
                self._documents = before
                raise
            logger.info(f"Cleared {len(before)} documents")
            self.notify_listeners()

    # Queries

    def get_documents(self) -> list[Document]:
        return list(self._documents)

    def get_active_documents(self) -> list[Document]:
        return [d for d in self._documents if d.active]

    def get_document(self, doc_id: str) -> Optional[Document]:
        return next((d for d in self._documents if d.id == doc_id), None)

    def get_stats(self) -> StoreStats:
        """Aggregate counts over the whole collection."""
        docs = self._documents
        return StoreStats(
            total=len(docs),
            active=sum(1 for d in docs if d.active),
            total_size_bytes=sum(d.size_bytes for d in docs),
            total_chunks=sum(len(d.chunks) for d in docs),
        )

    # Change notification

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify_listeners(self) -> None:
        """Call every listener with the current documents.

        A failing listener is logged and skipped; it never reaches the caller.
        """
        documents = self.get_documents()
        for listener in list(self._listeners):
            try:
                listener(documents)
            except Exception:
                logger.exception(f"Listener error in {listener!r}")

"""Serialization of the document collection to and from bytes."""

import json
from dataclasses import asdict
from datetime import datetime
from typing import Iterable

from docshelf.errors import CorruptStoreError
from docshelf.models import Document

FORMAT_VERSION = 1


def encode_documents(documents: Iterable[Document]) -> bytes:
    """Encode documents as UTF-8 JSON."""
    records = []
    for doc in documents:
        record = asdict(doc)
        record["chunks"] = list(doc.chunks)
        record["added_at"] = doc.added_at.isoformat()
        records.append(record)

    payload = {"version": FORMAT_VERSION, "documents": records}
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def decode_documents(data: bytes) -> list[Document]:
    """Decode bytes produced by encode_documents.

    Raises:
        CorruptStoreError: If the blob is not a readable document collection
    """
    try:
        payload = json.loads(data.decode("utf-8"))
        records = payload["documents"]
        return [_document_from_record(record) for record in records]
    except (UnicodeDecodeError, ValueError, KeyError, TypeError) as e:
        raise CorruptStoreError(f"Cannot decode stored documents: {e}") from e


def _document_from_record(record: dict) -> Document:
    return Document(
        id=record["id"],
        name=record["name"],
        mime_type=record["mime_type"],
        size_bytes=int(record["size_bytes"]),
        content=record["content"],
        chunks=tuple(record["chunks"]),
        added_at=datetime.fromisoformat(record["added_at"]),
        active=bool(record.get("active", True)),
    )

"""Protocol for key-value persistence backends."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class PersistenceBackend(Protocol):
    """Opaque blob storage addressed by key.

    The document store writes its whole collection under a single key
    after every mutation and reads it back once at startup.
    """

    def load(self, key: str) -> Optional[bytes]:
        """Return the blob stored under key, or None if absent."""
        ...

    def save(self, key: str, data: bytes) -> None:
        """Overwrite the blob stored under key."""
        ...

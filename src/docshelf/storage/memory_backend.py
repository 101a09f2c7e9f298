"""In-process persistence backend."""

from typing import Optional


class MemoryBackend:
    """Dict-backed blob storage. Contents vanish with the process."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._blobs: dict[str, bytes] = dict(initial or {})
        self.save_count = 0

    def load(self, key: str) -> Optional[bytes]:
        return self._blobs.get(key)

    def save(self, key: str, data: bytes) -> None:
        self._blobs[key] = bytes(data)
        self.save_count += 1

"""Runtime configuration for DocShelf."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocShelfSettings(BaseSettings):
    """Settings read from DOCSHELF_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSHELF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    store_path: Path = Field(
        default=Path("docshelf.db"),
        description="SQLite file holding the persisted document collection.",
    )
    storage_key: str = Field(
        default="rag.documents",
        description="Key the collection blob is stored under.",
    )
    chunk_size: int = Field(
        default=500,
        gt=0,
        description="Target chunk length in characters.",
    )
    chunk_overlap: int = Field(
        default=50,
        ge=0,
        description="Overlap budget in characters (divided by 5 to get words).",
    )
    top_k: int = Field(
        default=3,
        ge=0,
        description="Number of chunks returned per query.",
    )


@lru_cache(maxsize=1)
def get_settings() -> DocShelfSettings:
    """Return the process-wide settings instance."""
    return DocShelfSettings()


__all__ = ["DocShelfSettings", "get_settings"]

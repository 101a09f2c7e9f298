"""Database schema for the SQLite persistence backend."""

SCHEMA = """
-- Blob table: one opaque value per key, overwritten on every save
CREATE TABLE IF NOT EXISTS blobs (
    key TEXT PRIMARY KEY,
    value BLOB NOT NULL,
    updated_at TEXT NOT NULL
);
"""

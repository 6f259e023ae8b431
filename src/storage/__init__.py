"""Persistence package."""

from src.storage.text_store import DataFileError, StorageError, TextFileStore

__all__ = [
    "TextFileStore",
    "StorageError",
    "DataFileError",
]

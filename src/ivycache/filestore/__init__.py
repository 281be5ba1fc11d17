"""Keyed file storage backends."""

from ivycache.filestore.base import FileStore, StoredFile, StoreStats
from ivycache.filestore.grouped import (
    ArtifactFileStore,
    GroupedAndNamedFileStore,
    StoreKey,
)
from ivycache.filestore.path_key import PathKeyFileStore
from ivycache.filestore.temp import TemporaryFileProvider

__all__ = [
    "ArtifactFileStore",
    "FileStore",
    "GroupedAndNamedFileStore",
    "PathKeyFileStore",
    "StoreKey",
    "StoreStats",
    "StoredFile",
    "TemporaryFileProvider",
]

"""Base class for keyed FileStore implementations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from ivycache.hashing import sha1_of


@dataclass
class StoreStats:
    """Store statistics tracking hits, misses, and puts."""

    hits: int = 0  # get() found a file
    misses: int = 0  # get() found nothing
    puts: int = 0  # put() or move() committed a file


@dataclass(frozen=True)
class StoredFile:
    """A file committed to a FileStore under a relative key."""

    key: str
    path: Path

    @cached_property
    def sha1(self) -> str:
        """SHA-1 hex digest of the content, computed on first access."""
        return sha1_of(self.path)


class FileStore(ABC):
    """Abstract base class for file storage keyed by relative path.

    Implementations own copy, overwrite and atomicity; callers only supply
    correctly shaped keys.
    """

    def __init__(self) -> None:
        """Initialize the store with statistics."""
        self.stats = StoreStats()

    def reset_stats(self) -> None:
        """Reset store statistics to zero."""
        self.stats = StoreStats()

    @abstractmethod
    def put(self, key: str, source: Path) -> StoredFile:
        """Copy source into the store under key, replacing any existing file.

        Args:
            key: Relative, ``/``-separated path.
            source: Existing file whose content is copied.

        Returns:
            The stored file.
        """
        ...

    @abstractmethod
    def move(self, key: str, source: Path) -> StoredFile:
        """Move source into the store under key, replacing any existing file."""
        ...

    @abstractmethod
    def get(self, key: str) -> StoredFile | None:
        """Return the stored file for key, or None if absent."""
        ...

    @abstractmethod
    def search(self, pattern: str) -> list[StoredFile]:
        """Return the stored files whose key matches a glob pattern."""
        ...

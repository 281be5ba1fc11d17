"""PathKeyFileStore: filesystem storage keyed by relative path."""

import logging
import os
import shutil
import uuid
from pathlib import Path

from ivycache.filestore.base import FileStore, StoredFile
from ivycache.tree import PARTIAL_SUFFIX, SingleIncludePatternFileTree

log = logging.getLogger(__name__)


class PathKeyFileStore(FileStore):
    """Filesystem-based file store.

    A key such as ``org/lib/1.0/lib-1.0.jar`` is stored at the same relative
    path below ``base_dir``. Writes go to a sibling ``.part`` file which is
    then renamed over the destination, so readers never observe a partially
    written file.
    """

    def __init__(self, base_dir: Path | str) -> None:
        """Initialize PathKeyFileStore.

        Args:
            base_dir: Root directory of the store. Created lazily on first write.
        """
        super().__init__()
        self.base_dir = Path(base_dir)

    def _get_path(self, key: str) -> Path:
        """Get filesystem path for a key.

        Raises:
            ValueError: If the key is empty, absolute, or escapes the store.
        """
        segments = key.split("/")
        if not key or key.startswith("/") or "" in segments:
            raise ValueError(f"Invalid store key: {key!r}")
        if any(s in (".", "..") for s in segments):
            raise ValueError(f"Store key must not contain relative segments: {key!r}")
        if key.endswith(PARTIAL_SUFFIX):
            raise ValueError(f"Store key must not end with {PARTIAL_SUFFIX!r}: {key!r}")
        return self.base_dir.joinpath(*segments)

    def _commit(self, key: str, source: Path, move: bool) -> StoredFile:
        path = self._get_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write atomically (write to temp file, then rename)
        temp_path = path.with_name(f"{path.name}.{uuid.uuid4().hex}{PARTIAL_SUFFIX}")
        try:
            if move:
                shutil.move(source, temp_path)
            else:
                shutil.copyfile(source, temp_path)
            os.replace(temp_path, path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        self.stats.puts += 1
        log.debug("Stored %s at %s", key, path)
        return StoredFile(key, path)

    def put(self, key: str, source: Path) -> StoredFile:
        """Copy source into the store under key."""
        return self._commit(key, Path(source), move=False)

    def move(self, key: str, source: Path) -> StoredFile:
        """Move source into the store under key."""
        return self._commit(key, Path(source), move=True)

    def get(self, key: str) -> StoredFile | None:
        """Return the stored file for key, or None if absent."""
        path = self._get_path(key)
        if path.is_file():
            self.stats.hits += 1
            return StoredFile(key, path)
        self.stats.misses += 1
        return None

    def search(self, pattern: str) -> list[StoredFile]:
        """Return the stored files whose key matches a glob pattern."""
        if not self.base_dir.is_dir():
            return []
        return [
            StoredFile(path.relative_to(self.base_dir).as_posix(), path)
            for path in SingleIncludePatternFileTree(self.base_dir, pattern)
        ]

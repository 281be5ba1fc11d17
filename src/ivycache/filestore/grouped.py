"""Grouped file stores: place content under a (group, name) key."""

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from ivycache.coordinate import ArtifactCoordinate, normalize_group
from ivycache.filestore.base import FileStore, StoredFile
from ivycache.filestore.temp import TemporaryFileProvider
from ivycache.pattern import ResourcePattern
from ivycache.tree import has_wildcard

log = logging.getLogger(__name__)

K = TypeVar("K")

# Either an existing file to copy, or a callable writing content to a path
ContentSource = Path | str | Callable[[Path], None]


@dataclass(frozen=True)
class StoreKey:
    """Group and name segments of a store key."""

    group: str
    name: str

    @property
    def path(self) -> str:
        """The full relative key: group path as prefix, name as file name."""
        return f"{self.group}/{self.name}"

    def __str__(self) -> str:
        return self.path


class GroupedAndNamedFileStore(Generic[K]):
    """Stores content in a FileStore under ``<group>/<name>`` keys.

    The two callables decide the layout; this class only computes keys and
    stages content. Copy, overwrite and atomic commit belong to the
    underlying FileStore.
    """

    def __init__(
        self,
        delegate: FileStore,
        temp_provider: TemporaryFileProvider,
        group_of: Callable[[K], str],
        name_of: Callable[[K], str],
    ) -> None:
        """Initialize GroupedAndNamedFileStore.

        Args:
            delegate: The keyed file store performing writes.
            temp_provider: Provider of staging files for written content.
            group_of: Renders the group path segment of a key.
            name_of: Renders the name path segment of a key.
        """
        self.delegate = delegate
        self.temp_provider = temp_provider
        self._group_of = group_of
        self._name_of = name_of

    def compute_store_key(self, key: K) -> StoreKey:
        """Compute the (group, name) store key."""
        return StoreKey(self._group_of(key), self._name_of(key))

    def store(self, key: K, source: ContentSource) -> StoredFile:
        """Place content under the key computed for ``key``.

        Args:
            key: The identifier to store.
            source: Existing file to copy, or a callable that writes the
                content into the staging path it is given.

        Returns:
            The stored file.
        """
        store_key = self.compute_store_key(key).path
        if not callable(source):
            return self.delegate.put(store_key, Path(source))

        # The name may span several segments; clean up from the unique root
        staging = self.temp_provider.new_temporary_directory()
        staged = staging.joinpath(*self._name_of(key).split("/"))
        try:
            staged.parent.mkdir(parents=True, exist_ok=True)
            source(staged)
            return self.delegate.move(store_key, staged)
        finally:
            shutil.rmtree(staging, ignore_errors=True)

    def get(self, key: K) -> StoredFile | None:
        """Return the stored file for ``key``, or None."""
        return self.delegate.get(self.compute_store_key(key).path)

    def search(self, key: K) -> list[StoredFile]:
        """Return stored files matching ``key`` (rendered values may be globs)."""
        return self.delegate.search(self.compute_store_key(key).path)


class ArtifactFileStore(GroupedAndNamedFileStore[ArtifactCoordinate]):
    """Stores artifacts under ``<org>/<module>[/<branch>]/<rev>/<file name>``.

    Only the fields referenced by the two patterns shape the key: coordinates
    differing in any other field (e.g. type) share a location.
    """

    GROUP_PATTERN = "[organisation]/[module](/[branch])/[revision]"
    NAME_PATTERN = "[artifact]-[revision](-[classifier])(.[ext])"

    def __init__(
        self, delegate: FileStore, temp_provider: TemporaryFileProvider
    ) -> None:
        self.group_pattern = ResourcePattern(self.GROUP_PATTERN)
        self.name_pattern = ResourcePattern(self.NAME_PATTERN)
        super().__init__(
            delegate,
            temp_provider,
            self._renderer(self.group_pattern),
            self._renderer(self.name_pattern),
        )

    @staticmethod
    def _renderer(
        pattern: ResourcePattern,
    ) -> Callable[[ArtifactCoordinate], str]:
        def render(coordinate: ArtifactCoordinate) -> str:
            return pattern.to_path(normalize_group(coordinate))

        return render

    @classmethod
    def locator_pattern(cls) -> ResourcePattern:
        """The pattern a finder uses to see files placed by this store."""
        return ResourcePattern(f"{cls.GROUP_PATTERN}/{cls.NAME_PATTERN}")

    def compute_store_key(self, key: ArtifactCoordinate) -> StoreKey:
        """Compute the store key of a fully resolved coordinate.

        Raises:
            ValueError: If a rendered segment contains glob metacharacters.
        """
        store_key = super().compute_store_key(key)
        if has_wildcard(store_key.path):
            raise ValueError(
                f"Cannot store {key}: key {store_key.path!r} contains wildcards"
            )
        return store_key

    def store(self, key: ArtifactCoordinate, source: ContentSource) -> StoredFile:
        stored = super().store(key, source)
        log.debug("Stored artifact %s as %s", key, stored.key)
        return stored

    def search(self, key: ArtifactCoordinate) -> list[StoredFile]:
        """Return stored files matching a possibly wildcarded coordinate."""
        store_key = super().compute_store_key(key)
        return self.delegate.search(store_key.path)

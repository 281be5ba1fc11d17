"""ArtifactCache: one cache root wired for placement and lookup."""

from pathlib import Path

from ivycache.config import CacheConfig, default_tmp_dir
from ivycache.coordinate import ArtifactCoordinate, normalize_group
from ivycache.filestore.base import StoredFile
from ivycache.filestore.grouped import ArtifactFileStore, ContentSource, StoreKey
from ivycache.filestore.path_key import PathKeyFileStore
from ivycache.filestore.temp import TemporaryFileProvider
from ivycache.finder import PatternBasedResourceFinder, ResourceCandidates


class ArtifactCache:
    """Artifact placement and lookup over a single cache root.

    Files placed with store() are visible to find() because the finder uses
    the same group and name patterns as the file store.
    """

    def __init__(
        self,
        cache_dir: Path | str,
        tmp_dir: Path | str | None = None,
    ) -> None:
        """Initialize ArtifactCache.

        Args:
            cache_dir: Root directory of the cache.
            tmp_dir: Staging directory. Defaults to ``<cache_dir>.tmp``.
        """
        self.cache_dir = Path(cache_dir)
        self.files = PathKeyFileStore(self.cache_dir)
        self.temp_provider = TemporaryFileProvider(
            tmp_dir if tmp_dir is not None else default_tmp_dir(self.cache_dir)
        )
        self.store_layout = ArtifactFileStore(self.files, self.temp_provider)
        self.finder = PatternBasedResourceFinder(
            self.cache_dir, ArtifactFileStore.locator_pattern()
        )

    @classmethod
    def from_config(cls, config: CacheConfig | None = None) -> "ArtifactCache":
        """Build a cache from config (environment config when None)."""
        config = config or CacheConfig.from_env()
        return cls(config.cache_dir, config.tmp_dir)

    def store_key(self, coordinate: ArtifactCoordinate) -> StoreKey:
        """Compute the store key of a coordinate."""
        return self.store_layout.compute_store_key(coordinate)

    def store(self, coordinate: ArtifactCoordinate, source: ContentSource) -> StoredFile:
        """Place content for a coordinate in the cache."""
        return self.store_layout.store(coordinate, source)

    def find(self, coordinate: ArtifactCoordinate | None) -> list[Path]:
        """Return cached files matching a possibly wildcarded coordinate."""
        return self.finder.find(self._normalized(coordinate))

    def find_candidates(
        self, coordinate: ArtifactCoordinate | None
    ) -> ResourceCandidates:
        """Return cached files for a coordinate, evaluated on first use."""
        return self.finder.find_candidates(self._normalized(coordinate))

    @staticmethod
    def _normalized(
        coordinate: ArtifactCoordinate | None,
    ) -> ArtifactCoordinate | None:
        # Lookups must see the same group directory the store wrote
        return None if coordinate is None else normalize_group(coordinate)

"""ivycache: coordinate-addressed local artifact cache."""

from importlib.metadata import PackageNotFoundError, version

from ivycache.cache import ArtifactCache
from ivycache.config import CacheConfig
from ivycache.coordinate import ArtifactCoordinate, normalize_group
from ivycache.errors import CacheLookupError, IvyCacheError, TemplateError
from ivycache.filestore import (
    ArtifactFileStore,
    PathKeyFileStore,
    StoredFile,
    StoreKey,
    TemporaryFileProvider,
)
from ivycache.finder import (
    CompositeResourceFinder,
    PatternBasedResourceFinder,
    ResourceCandidates,
)
from ivycache.pattern import ResourcePattern

try:
    __version__ = version("ivycache")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "ArtifactCache",
    "ArtifactCoordinate",
    "ArtifactFileStore",
    "CacheConfig",
    "CacheLookupError",
    "CompositeResourceFinder",
    "IvyCacheError",
    "PathKeyFileStore",
    "PatternBasedResourceFinder",
    "ResourceCandidates",
    "ResourcePattern",
    "StoreKey",
    "StoredFile",
    "TemplateError",
    "TemporaryFileProvider",
    "normalize_group",
    "__version__",
]

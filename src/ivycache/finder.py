"""Finders locating already cached files for an artifact coordinate."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from pathlib import Path

from ivycache.coordinate import ArtifactCoordinate
from ivycache.errors import CacheLookupError
from ivycache.hashing import sha1_of
from ivycache.pattern import ResourcePattern
from ivycache.tree import SingleIncludePatternFileTree

log = logging.getLogger(__name__)

# A deferred lookup: touches the filesystem only when called.
Query = Callable[[], list[Path]]
TreeFactory = Callable[[Path, str], Iterable[Path]]


class ResourceCandidates:
    """Lazily evaluated set of local files that may satisfy a coordinate.

    The query runs at most once, on first access to the files.
    """

    def __init__(self, query: Query) -> None:
        self._query = query
        self._files: list[Path] | None = None

    @property
    def files(self) -> list[Path]:
        if self._files is None:
            self._files = self._query()
        return self._files

    def is_none(self) -> bool:
        """Return True if no candidate file exists."""
        return not self.files

    def find_by_sha1(self, sha1: str) -> Path | None:
        """Return the first candidate whose content has the given SHA-1."""
        sha1 = sha1.lower()
        for path in self.files:
            if sha1_of(path) == sha1:
                return path
        return None

    def __iter__(self):
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)


class ResourceFinder(ABC):
    """Base class for local resource finders."""

    @abstractmethod
    def plan(self, coordinate: ArtifactCoordinate | None) -> Query:
        """Return a deferred query for the files matching the coordinate."""
        ...

    def find(self, coordinate: ArtifactCoordinate | None) -> list[Path]:
        """Return the files matching the coordinate.

        Raises:
            CacheLookupError: If an existing cache directory cannot be read.
        """
        return self.plan(coordinate)()

    def find_candidates(
        self, coordinate: ArtifactCoordinate | None
    ) -> ResourceCandidates:
        """Return the matching files wrapped in a lazy candidates object."""
        return ResourceCandidates(self.plan(coordinate))


class PatternBasedResourceFinder(ResourceFinder):
    """Finds cached files by rendering a coordinate into an include pattern.

    The rendered path is never treated as a literal path: it is matched
    against the tree below ``base_dir``, so a coordinate whose revision is
    ``1.*`` finds every cached ``1.x`` revision, and a fully resolved
    coordinate finds at most its own file.
    """

    def __init__(
        self,
        base_dir: Path | str,
        pattern: ResourcePattern | str,
        tree_factory: TreeFactory = SingleIncludePatternFileTree,
    ) -> None:
        """Initialize PatternBasedResourceFinder.

        Args:
            base_dir: Root directory of the cache to search.
            pattern: ResourcePattern (or template string) relative to base_dir.
            tree_factory: Builds the file tree for (base_dir, include pattern).
        """
        self.base_dir = Path(base_dir)
        self.pattern = (
            pattern if isinstance(pattern, ResourcePattern) else ResourcePattern(pattern)
        )
        self._tree_factory = tree_factory

    def plan(self, coordinate: ArtifactCoordinate | None) -> Query:
        def query() -> list[Path]:
            if coordinate is None:
                return []
            return self._matching_files(coordinate)

        return query

    def _matching_files(self, coordinate: ArtifactCoordinate) -> list[Path]:
        include = self.pattern.to_path(coordinate)
        if not self.base_dir.is_dir():
            log.debug("Cache root %s does not exist, no match for %s", self.base_dir, include)
            return []
        try:
            files = list(self._tree_factory(self.base_dir, include))
        except OSError as e:
            raise CacheLookupError(self.base_dir, include, str(e)) from e
        log.debug("Found %d file(s) for %s under %s", len(files), include, self.base_dir)
        return files

    def __repr__(self) -> str:
        return f"PatternBasedResourceFinder({str(self.base_dir)!r}, {self.pattern.template!r})"


class CompositeResourceFinder(ResourceFinder):
    """Concatenates the results of several finders, in order."""

    def __init__(self, *finders: ResourceFinder) -> None:
        self.finders = list(finders)

    def plan(self, coordinate: ArtifactCoordinate | None) -> Query:
        queries = [finder.plan(coordinate) for finder in self.finders]

        def query() -> list[Path]:
            files: list[Path] = []
            for q in queries:
                files.extend(q())
            return files

        return query

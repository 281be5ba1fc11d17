"""Pytest configuration and fixtures."""

import pytest

from ivycache.coordinate import ArtifactCoordinate
from ivycache.filestore.grouped import ArtifactFileStore
from ivycache.filestore.path_key import PathKeyFileStore
from ivycache.filestore.temp import TemporaryFileProvider
from ivycache.tree import SingleIncludePatternFileTree


@pytest.fixture
def cache_dir(tmp_path):
    """Root of a not yet populated cache."""
    return tmp_path / "files-1"


@pytest.fixture
def coordinate():
    """A fully resolved coordinate with no optional fields."""
    return ArtifactCoordinate(
        group="org",
        module="lib",
        revision="1.0",
        name="lib",
        extension="jar",
    )


@pytest.fixture
def artifact_store(cache_dir, tmp_path):
    """An ArtifactFileStore writing below cache_dir."""
    return ArtifactFileStore(
        PathKeyFileStore(cache_dir), TemporaryFileProvider(tmp_path / "tmp")
    )


class CountingTreeFactory:
    """Tree factory recording every traversal request."""

    def __init__(self):
        self.calls = []

    def __call__(self, base_dir, include):
        self.calls.append((base_dir, include))
        return SingleIncludePatternFileTree(base_dir, include)


@pytest.fixture
def counting_tree():
    """A CountingTreeFactory instance."""
    return CountingTreeFactory()

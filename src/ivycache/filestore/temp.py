"""TemporaryFileProvider: scratch files for staging content before commit."""

import os
import tempfile
import uuid
from pathlib import Path


class TemporaryFileProvider:
    """Provides scratch locations below a single temp directory.

    Staged files should live on the same filesystem as the store so the
    final move into place is a rename.
    """

    def __init__(self, base_dir: Path | str | None = None) -> None:
        """Initialize TemporaryFileProvider.

        Args:
            base_dir: Directory for temporary files. Defaults to the system
                temp directory.
        """
        if base_dir is None:
            base_dir = Path(tempfile.gettempdir()) / "ivycache"
        self.base_dir = Path(base_dir)

    def new_temporary_directory(self) -> Path:
        """Create a fresh, empty directory below base_dir and return it."""
        directory = self.base_dir / uuid.uuid4().hex
        directory.mkdir(parents=True)
        return directory

    def new_temporary_file(self, *segments: str) -> Path:
        """Return a fresh, not yet existing path ending with the given segments.

        The file is placed in a unique directory, so callers can keep a
        meaningful file name. Parent directories are created.
        """
        directory = self.new_temporary_directory()
        path = directory.joinpath(*segments) if segments else directory / "file"
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def create_temporary_file(self, prefix: str = "tmp", suffix: str = "") -> Path:
        """Create an empty temporary file and return its path."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=self.base_dir)
        os.close(fd)
        return Path(name)

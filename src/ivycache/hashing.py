"""Content hashing for cached files."""

import hashlib
from pathlib import Path


def sha1_of(path: Path) -> str:
    """Return the SHA-1 hex digest of a file's content.

    Args:
        path: The file to hash. Read in chunks, so size is not a concern.

    Returns:
        A hexadecimal SHA-1 hash string (40 characters).
    """
    digest = hashlib.sha1()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()

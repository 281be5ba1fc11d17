"""Centralized configuration for ivycache."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path


def default_tmp_dir(cache_dir: Path | str) -> Path:
    """Return the staging directory for a cache root: its ``.tmp`` sibling.

    The path is resolved first, so relative roots such as ``.`` get a named
    sibling. The filesystem root has no sibling and stages in ``/.tmp``.
    """
    root = Path(cache_dir).resolve()
    if not root.name:
        return root / ".tmp"
    return root.with_name(root.name + ".tmp")


@dataclass(slots=True)
class CacheConfig:
    """All cache configuration in one place.

    Environment variables (all optional):
        IVYCACHE_DIR:        Root of the artifact cache. Default ``.ivycache/files-1``
                             in the current working directory.
        IVYCACHE_TMP_DIR:    Staging directory for writes. Default ``<cache_dir>.tmp``.
        IVYCACHE_LOG_LEVEL:  Level applied to the ``ivycache`` logger. Default "WARNING".
    """

    cache_dir: Path
    tmp_dir: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.cache_dir = Path(self.cache_dir)
        if self.tmp_dir is None:
            self.tmp_dir = default_tmp_dir(self.cache_dir)
        else:
            self.tmp_dir = Path(self.tmp_dir)

    @classmethod
    def from_env(cls, *, log_level: str = "WARNING") -> "CacheConfig":
        """Build config from environment variables + explicit overrides."""
        default_dir = Path.cwd() / ".ivycache" / "files-1"
        tmp_dir = os.environ.get("IVYCACHE_TMP_DIR")
        return cls(
            cache_dir=Path(os.environ.get("IVYCACHE_DIR", default_dir)),
            tmp_dir=Path(tmp_dir) if tmp_dir else None,
            log_level=os.environ.get("IVYCACHE_LOG_LEVEL", log_level),
        )

    def configure_logging(self) -> None:
        """Apply log_level to the ``ivycache`` logger.

        Raises:
            ValueError: If log_level is not a known level name.
        """
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        logging.getLogger("ivycache").setLevel(level)

"""Exception hierarchy for ivycache."""

from pathlib import Path


class IvyCacheError(Exception):
    """Base class for all ivycache errors."""


class TemplateError(IvyCacheError, ValueError):
    """A path template is malformed or references an unknown placeholder."""

    def __init__(self, template: str, message: str) -> None:
        super().__init__(f"Invalid pattern {template!r}: {message}")
        self.template = template


class CacheLookupError(IvyCacheError, OSError):
    """Traversal of an existing cache root failed."""

    def __init__(self, base_dir: Path, pattern: str, reason: str) -> None:
        super().__init__(
            f"Could not search {str(base_dir)!r} for {pattern!r}: {reason}"
        )
        self.base_dir = base_dir
        self.pattern = pattern

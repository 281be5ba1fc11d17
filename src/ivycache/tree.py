"""File tree traversal restricted to a single include pattern."""

import os
import re
from collections.abc import Iterator
from pathlib import Path

_MAGIC = re.compile(r"[*?]")

# Suffix of files still being written by a store; never part of a tree
PARTIAL_SUFFIX = ".part"


def has_wildcard(value: str) -> bool:
    """Return True if value contains a glob metacharacter (``*`` or ``?``)."""
    return _MAGIC.search(value) is not None


def _segment_regex(segment: str) -> re.Pattern[str]:
    """Translate one path segment to a regex: ``*`` any run, ``?`` one char."""
    parts = []
    for char in segment:
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


class SingleIncludePatternFileTree:
    """The regular files below ``base_dir`` matching one include pattern.

    The pattern is a ``/``-separated relative path. ``*`` matches within a
    segment, ``?`` matches one character, a ``**`` segment matches zero or
    more directories, anything else matches literally. Literal segments are
    resolved directly instead of listing their parent, so a fully resolved
    pattern costs a handful of stat calls.

    Files ending with PARTIAL_SUFFIX are in-flight writes and are skipped.
    Iteration order is deterministic: entries are visited sorted by name.
    OSErrors raised while listing directories propagate to the caller.
    """

    def __init__(self, base_dir: Path | str, include: str) -> None:
        self.base_dir = Path(base_dir)
        self.include = include
        self._segments = tuple(s for s in include.replace("\\", "/").split("/") if s)
        self._compiled: dict[str, re.Pattern[str]] = {}

    def __iter__(self) -> Iterator[Path]:
        seen: set[Path] = set()
        for path in self._visit(self.base_dir, self._segments):
            if path.name.endswith(PARTIAL_SUFFIX):
                continue
            if path not in seen:
                seen.add(path)
                yield path

    def files(self) -> list[Path]:
        """Collect the matching files into a list."""
        return list(self)

    def _matches(self, segment: str, name: str) -> bool:
        regex = self._compiled.get(segment)
        if regex is None:
            regex = self._compiled[segment] = _segment_regex(segment)
        return regex.fullmatch(name) is not None

    def _visit(self, directory: Path, segments: tuple[str, ...]) -> Iterator[Path]:
        if not segments:
            return
        head, rest = segments[0], segments[1:]

        if head == "**":
            if rest:
                # Zero directories
                yield from self._visit(directory, rest)
            for entry in _scan(directory):
                if entry.is_dir():
                    # One or more directories
                    yield from self._visit(Path(entry.path), segments)
                elif not rest and entry.is_file():
                    yield Path(entry.path)
            return

        if not has_wildcard(head):
            path = directory / head
            if rest:
                if path.is_dir():
                    yield from self._visit(path, rest)
            elif path.is_file():
                yield path
            return

        for entry in _scan(directory):
            if not self._matches(head, entry.name):
                continue
            if rest:
                if entry.is_dir():
                    yield from self._visit(Path(entry.path), rest)
            elif entry.is_file():
                yield Path(entry.path)


def _scan(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda e: e.name)

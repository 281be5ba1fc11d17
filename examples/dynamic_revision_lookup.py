"""Example: place several revisions of an artifact, then look them up.

Stores one file per revision through ArtifactCache, then resolves a
wildcarded revision (e.g. ``1.*``) against the cache without any index:
the rendered path is matched against the cache tree directly.
"""

import argparse
import tempfile
from pathlib import Path

from ivycache import ArtifactCache, ArtifactCoordinate


def parse_revisions(s: str) -> list[str]:
    """Parse comma-separated revisions."""
    return [r.strip() for r in s.split(",") if r.strip()]


def main():
    parser = argparse.ArgumentParser(
        description="Store revisions of an artifact and resolve a dynamic revision"
    )
    parser.add_argument(
        "--group",
        type=str,
        default="com/example",
        help="Artifact group (default: com/example, normalized to com.example)",
    )
    parser.add_argument(
        "--revisions",
        type=str,
        default="1.0,1.1,1.2,2.0",
        help="Revisions to store (comma-separated, default: 1.0,1.1,1.2,2.0)",
    )
    parser.add_argument(
        "--query",
        type=str,
        default="1.*",
        help="Revision to look up, may contain wildcards (default: 1.*)",
    )
    args = parser.parse_args()

    with tempfile.TemporaryDirectory() as tmpdir:
        cache = ArtifactCache(Path(tmpdir) / "files-1")

        for revision in parse_revisions(args.revisions):
            coordinate = ArtifactCoordinate(
                group=args.group,
                module="lib",
                revision=revision,
                name="lib",
                extension="jar",
            )
            stored = cache.store(
                coordinate,
                lambda path, r=revision: path.write_text(f"lib {r}\n"),
            )
            print(f"Stored {coordinate} -> {stored.key}")

        query = ArtifactCoordinate(
            group=args.group,
            module="lib",
            revision=args.query,
            name="lib",
            extension="jar",
        )
        found = cache.find(query)
        print(f"Lookup {query}: {len(found)} file(s)")
        for path in found:
            print(f"  {path.relative_to(cache.cache_dir).as_posix()}")


if __name__ == "__main__":
    main()

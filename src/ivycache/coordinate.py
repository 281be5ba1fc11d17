"""ArtifactCoordinate: the immutable identifier of a cached artifact."""

import dataclasses
import re
from dataclasses import dataclass, field

# group:module:revision[:classifier][@ext]
_NOTATION = re.compile(
    r"^(?P<group>[^:@]+):(?P<module>[^:@]+):(?P<revision>[^:@]+)"
    r"(?::(?P<classifier>[^:@]+))?(?:@(?P<ext>[^:@]+))?$"
)

_REQUIRED = ("group", "module", "revision", "name")
_OPTIONAL = ("extension", "classifier", "branch")


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Logical identifier of an artifact in the local cache.

    Equality and hashing are structural over every field. Optional fields
    are None when absent, so "absent" and "empty" are never conflated.

    Example:
        ArtifactCoordinate(
            group="org.example",
            module="lib",
            revision="1.0",
            name="lib",
            extension="jar",
        )
    """

    group: str
    module: str
    revision: str
    name: str
    type: str | None = None
    extension: str | None = None
    classifier: str | None = None
    branch: str | None = None
    # True when type was derived from the extension rather than given
    _derived_type: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate fields and derive the default type.

        Raises:
            ValueError: If a required field is missing or empty.
            TypeError: If an optional field is neither None nor a string.
        """
        for field_name in _REQUIRED:
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise ValueError(
                    f"Artifact coordinate field '{field_name}' must be a non-empty string"
                )
        for field_name in _OPTIONAL:
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise TypeError(
                    f"Artifact coordinate field '{field_name}' must be str or None, "
                    f"got {type(value).__name__}"
                )
        if self.type is None:
            # Frozen dataclass: assign through object.__setattr__
            object.__setattr__(self, "type", self.extension or "jar")
            object.__setattr__(self, "_derived_type", True)

    @classmethod
    def parse(cls, notation: str) -> "ArtifactCoordinate":
        """Parse dependency notation into a coordinate.

        Accepts ``group:module:revision[:classifier][@ext]``. The artifact
        name is the module name and the type follows the extension.

        Args:
            notation: The dependency notation string.

        Returns:
            The parsed coordinate.

        Raises:
            ValueError: If the notation is malformed.
        """
        match = _NOTATION.match(notation.strip())
        if match is None:
            raise ValueError(
                f"Invalid artifact notation {notation!r}, "
                f"expected 'group:module:revision[:classifier][@ext]'"
            )
        ext = match.group("ext")
        return cls(
            group=match.group("group"),
            module=match.group("module"),
            revision=match.group("revision"),
            name=match.group("module"),
            type=ext,
            extension=ext or "jar",
            classifier=match.group("classifier"),
        )

    @property
    def module_id(self) -> str:
        """The ``group:module`` identifier."""
        return f"{self.group}:{self.module}"

    def replace(self, **changes: str | None) -> "ArtifactCoordinate":
        """Return a copy with the given fields changed.

        A type derived from the extension is derived again for the copy
        unless ``type`` is among the changes.
        """
        if self._derived_type and "type" not in changes:
            changes["type"] = None
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        file_name = self.name
        if self.classifier:
            file_name += f"-{self.classifier}"
        if self.extension:
            file_name += f".{self.extension}"
        return f"{self.group}:{self.module}:{self.revision}:{file_name}"


def normalize_group(coordinate: ArtifactCoordinate) -> ArtifactCoordinate:
    """Replace path separators in the group with dots.

    A group such as ``com/example`` would otherwise render as two directory
    levels and shift every path segment after it. The input is never
    modified; when the group has no separator the same instance is returned.

    Args:
        coordinate: The coordinate to normalize.

    Returns:
        A coordinate whose group contains no ``/``.
    """
    if "/" not in coordinate.group:
        return coordinate
    return coordinate.replace(group=coordinate.group.replace("/", "."))

"""ResourcePattern: renders artifact coordinates through Ivy-style path templates.

A template is a sequence of literal text, placeholders such as ``[module]``
and optional groups such as ``(-[classifier])``. An optional group is
emitted only when every placeholder inside it has a non-empty value;
otherwise the whole group, literal text included, is dropped:

    >>> pattern = ResourcePattern("[organisation]/[module](/[branch])/[revision]")
    >>> pattern.to_path(ArtifactCoordinate("org", "lib", "1.0", "lib"))
    'org/lib/1.0'
"""

from dataclasses import dataclass

from cachetools import LRUCache, cached

from ivycache.coordinate import ArtifactCoordinate
from ivycache.errors import TemplateError

# Placeholder name -> ArtifactCoordinate attribute
FIELD_BINDINGS: dict[str, str] = {
    "organisation": "group",
    "module": "module",
    "branch": "branch",
    "revision": "revision",
    "artifact": "name",
    "type": "type",
    "ext": "extension",
    "classifier": "classifier",
}


@dataclass(frozen=True)
class Literal:
    """Literal template text, emitted verbatim."""

    text: str


@dataclass(frozen=True)
class Placeholder:
    """A ``[name]`` token bound to a coordinate field."""

    name: str

    @property
    def field(self) -> str:
        return FIELD_BINDINGS[self.name]


@dataclass(frozen=True)
class OptionalGroup:
    """A parenthesized sub-template dropped when any placeholder is empty."""

    tokens: tuple[Literal | Placeholder, ...]

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Placeholder))


Token = Literal | Placeholder | OptionalGroup


@cached(cache=LRUCache(maxsize=256))
def parse_template(template: str) -> tuple[Token, ...]:
    """Parse a template string into its token sequence.

    Args:
        template: The template, e.g. ``[artifact]-[revision](.[ext])``.

    Returns:
        Tuple of Literal, Placeholder and OptionalGroup tokens.

    Raises:
        TemplateError: If the template is malformed or references a
            placeholder outside FIELD_BINDINGS.
    """
    tokens: list[Token] = []
    group: list[Literal | Placeholder] | None = None
    text: list[str] = []

    def flush() -> None:
        if text:
            target = tokens if group is None else group
            target.append(Literal("".join(text)))
            text.clear()

    i = 0
    while i < len(template):
        char = template[i]
        if char == "[":
            end = template.find("]", i + 1)
            if end == -1:
                raise TemplateError(template, f"unterminated '[' at position {i}")
            name = template[i + 1 : end]
            if not name:
                raise TemplateError(template, f"empty placeholder at position {i}")
            if name not in FIELD_BINDINGS:
                raise TemplateError(
                    template,
                    f"unknown placeholder [{name}], "
                    f"expected one of {sorted(FIELD_BINDINGS)}",
                )
            flush()
            (tokens if group is None else group).append(Placeholder(name))
            i = end + 1
            continue
        if char == "]":
            raise TemplateError(template, f"unmatched ']' at position {i}")
        if char == "(":
            if group is not None:
                raise TemplateError(template, f"nested '(' at position {i}")
            flush()
            group = []
        elif char == ")":
            if group is None:
                raise TemplateError(template, f"unmatched ')' at position {i}")
            flush()
            optional = OptionalGroup(tuple(group))
            if not optional.placeholders:
                raise TemplateError(
                    template, f"optional group ending at {i} has no placeholder"
                )
            tokens.append(optional)
            group = None
        else:
            text.append(char)
        i += 1

    if group is not None:
        raise TemplateError(template, "unterminated '('")
    flush()
    return tuple(tokens)


def _value(coordinate: ArtifactCoordinate, placeholder: Placeholder) -> str:
    return getattr(coordinate, placeholder.field) or ""


def _render(tokens: tuple[Token, ...], coordinate: ArtifactCoordinate) -> str:
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, Literal):
            parts.append(token.text)
        elif isinstance(token, Placeholder):
            parts.append(_value(coordinate, token))
        elif all(_value(coordinate, p) for p in token.placeholders):
            parts.append(_render(token.tokens, coordinate))
    return "".join(parts)


class ResourcePattern:
    """A path template bound to the ArtifactCoordinate fields.

    The template is parsed once at construction so configuration errors
    surface immediately. Rendering is a pure function of the coordinate.
    """

    def __init__(self, template: str) -> None:
        """Initialize ResourcePattern.

        Args:
            template: The template string.

        Raises:
            TemplateError: If the template is malformed.
        """
        self.template = template
        self._tokens = parse_template(template)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def placeholders(self) -> frozenset[str]:
        """Names of all placeholders referenced by the template."""
        names: set[str] = set()
        for token in self._tokens:
            if isinstance(token, Placeholder):
                names.add(token.name)
            elif isinstance(token, OptionalGroup):
                names.update(p.name for p in token.placeholders)
        return frozenset(names)

    def to_path(self, coordinate: ArtifactCoordinate) -> str:
        """Render the coordinate into a path string."""
        return _render(self._tokens, coordinate)

    def to_module_path(self, coordinate: ArtifactCoordinate) -> str:
        """Render the location of the module descriptor (``ivy.xml``)."""
        descriptor = coordinate.replace(
            name="ivy", type="ivy", extension="xml", classifier=None
        )
        return self.to_path(descriptor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourcePattern):
            return False
        return self.template == other.template

    def __hash__(self) -> int:
        return hash(self.template)

    def __repr__(self) -> str:
        return f"ResourcePattern({self.template!r})"

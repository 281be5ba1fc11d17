"""Tests for ResourcePattern and template parsing."""

import pytest

from ivycache.coordinate import ArtifactCoordinate
from ivycache.errors import TemplateError
from ivycache.pattern import (
    Literal,
    OptionalGroup,
    Placeholder,
    ResourcePattern,
    parse_template,
)

GROUP_PATTERN = "[organisation]/[module](/[branch])/[revision]"
NAME_PATTERN = "[artifact]-[revision](-[classifier])(.[ext])"


class TestParseTemplate:
    """Tests for parse_template."""

    def test_tokens(self):
        """Literals, placeholders and optional groups are recognized."""
        tokens = parse_template("[artifact]-[revision](.[ext])")
        assert tokens == (
            Placeholder("artifact"),
            Literal("-"),
            Placeholder("revision"),
            OptionalGroup((Literal("."), Placeholder("ext"))),
        )

    def test_literal_only(self):
        """A template without placeholders is a single literal."""
        assert parse_template("static/path") == (Literal("static/path"),)

    def test_memoized(self):
        """Parsing the same template twice returns the same tokens."""
        assert parse_template(NAME_PATTERN) is parse_template(NAME_PATTERN)

    @pytest.mark.parametrize(
        "template, message",
        [
            ("[version]", "unknown placeholder"),
            ("[]", "empty placeholder"),
            ("[module", "unterminated"),
            ("module]", "unmatched ']'"),
            ("[module](-[classifier]", r"unterminated '\('"),
            ("[module]-[classifier])", r"unmatched '\)'"),
            ("((-[classifier]))", "nested"),
            ("[module](-static)", "no placeholder"),
        ],
    )
    def test_malformed(self, template, message):
        """Malformed templates raise TemplateError."""
        with pytest.raises(TemplateError, match=message):
            parse_template(template)


class TestResourcePattern:
    """Tests for ResourcePattern rendering."""

    def test_invalid_template_fails_at_construction(self):
        """Configuration errors surface when the pattern is built."""
        with pytest.raises(TemplateError):
            ResourcePattern("[organisation]/[unknown]")

    def test_template_error_is_value_error(self):
        """TemplateError can be caught as ValueError."""
        with pytest.raises(ValueError):
            ResourcePattern("[organisation")

    def test_group_pattern_without_branch(self):
        """The branch group is dropped with its separator."""
        coord = ArtifactCoordinate("org", "lib", "1.0", "lib")
        assert ResourcePattern(GROUP_PATTERN).to_path(coord) == "org/lib/1.0"

    def test_group_pattern_with_branch(self):
        """A present branch is rendered with its separator."""
        coord = ArtifactCoordinate("org", "lib", "1.0", "lib", branch="main")
        assert ResourcePattern(GROUP_PATTERN).to_path(coord) == "org/lib/main/1.0"

    def test_name_pattern_optional_groups(self):
        """Classifier and extension groups appear only when set."""
        pattern = ResourcePattern(NAME_PATTERN)
        coord = ArtifactCoordinate("org", "lib", "1.0", "lib")
        assert pattern.to_path(coord) == "lib-1.0"
        assert pattern.to_path(coord.replace(extension="jar")) == "lib-1.0.jar"
        assert (
            pattern.to_path(coord.replace(extension="jar", classifier="sources"))
            == "lib-1.0-sources.jar"
        )
        assert pattern.to_path(coord.replace(classifier="sources")) == "lib-1.0-sources"

    def test_empty_optional_value_drops_group(self):
        """An empty string drops the optional group like None does."""
        coord = ArtifactCoordinate("org", "lib", "1.0", "lib", classifier="")
        rendered = ResourcePattern("[module]-[revision](-[classifier])").to_path(coord)
        assert rendered == "lib-1.0"
        assert rendered.count("-") == 1

    def test_group_needs_every_placeholder(self):
        """A group with several placeholders is dropped if any is empty."""
        pattern = ResourcePattern("[module](-[classifier].[ext])")
        coord = ArtifactCoordinate("org", "lib", "1.0", "lib", extension="jar")
        assert pattern.to_path(coord) == "lib"
        assert pattern.to_path(coord.replace(classifier="x")) == "lib-x.jar"

    def test_type_placeholder(self):
        """[type] renders the coordinate type."""
        coord = ArtifactCoordinate("org", "lib", "1.0", "lib", extension="jar")
        assert ResourcePattern("[type]s/[artifact].[ext]").to_path(coord) == "jars/lib.jar"

    def test_no_placeholder_tokens_left(self):
        """The rendered output never contains template syntax."""
        coord = ArtifactCoordinate("org", "lib", "1.0", "lib", branch="b")
        rendered = ResourcePattern(f"{GROUP_PATTERN}/{NAME_PATTERN}").to_path(coord)
        assert "[" not in rendered
        assert "(" not in rendered

    def test_deterministic(self):
        """Rendering the same coordinate twice yields identical strings."""
        pattern = ResourcePattern(f"{GROUP_PATTERN}/{NAME_PATTERN}")
        coord = ArtifactCoordinate(
            "org", "lib", "1.0", "lib", extension="jar", classifier="c", branch="b"
        )
        assert pattern.to_path(coord) == pattern.to_path(coord)
        assert ResourcePattern(pattern.template).to_path(coord) == pattern.to_path(coord)

    def test_wildcards_pass_through(self):
        """Wildcard-bearing values are substituted verbatim."""
        coord = ArtifactCoordinate("org", "lib", "1.*", "lib", extension="jar")
        assert ResourcePattern(NAME_PATTERN).to_path(coord) == "lib-1.*.jar"

    def test_to_module_path(self):
        """to_module_path renders the ivy descriptor location."""
        pattern = ResourcePattern(f"{GROUP_PATTERN}/[artifact](-[classifier]).[ext]")
        coord = ArtifactCoordinate(
            "org", "lib", "1.0", "lib", extension="jar", classifier="sources"
        )
        assert pattern.to_module_path(coord) == "org/lib/1.0/ivy.xml"

    def test_placeholders(self):
        """placeholders lists every referenced name, including optional ones."""
        assert ResourcePattern(GROUP_PATTERN).placeholders == frozenset(
            {"organisation", "module", "branch", "revision"}
        )

    def test_equality(self):
        """Patterns compare by template."""
        assert ResourcePattern(GROUP_PATTERN) == ResourcePattern(GROUP_PATTERN)
        assert ResourcePattern(GROUP_PATTERN) != ResourcePattern(NAME_PATTERN)
        assert repr(ResourcePattern("[module]")) == "ResourcePattern('[module]')"

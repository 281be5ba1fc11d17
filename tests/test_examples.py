"""Unit tests for example scripts.

These tests ensure that the example scripts continue to work correctly
when code changes are made to the ivycache package. Tests execute the
scripts as external Python processes using subprocess for accurate testing.
"""

import subprocess
import sys
from pathlib import Path

import pytest

# Get the project root directory (parent of tests/)
PROJECT_ROOT = Path(__file__).parent.parent
EXAMPLES_DIR = PROJECT_ROOT / "examples"


class TestDynamicRevisionLookupExample:
    """Tests for examples/dynamic_revision_lookup.py."""

    @pytest.fixture
    def script_path(self):
        """Return the path to the dynamic revision lookup example script."""
        return EXAMPLES_DIR / "dynamic_revision_lookup.py"

    def test_default_arguments(self, script_path):
        """Test example with default arguments (query 1.*)."""
        result = subprocess.run(
            [sys.executable, str(script_path)],
            capture_output=True,
            text=True,
            check=True,
        )

        output = result.stdout
        assert (
            "Stored com/example:lib:1.0:lib.jar -> com.example/lib/1.0/lib-1.0.jar"
            in output
        )
        assert "Lookup com/example:lib:1.*:lib.jar: 3 file(s)" in output
        assert "  com.example/lib/1.2/lib-1.2.jar" in output
        assert "lib-2.0.jar\n" not in output.split("Lookup")[1]
        assert result.returncode == 0

    def test_exact_query(self, script_path):
        """Test example with a fully resolved revision."""
        result = subprocess.run(
            [sys.executable, str(script_path), "--group", "org", "--query", "2.0"],
            capture_output=True,
            text=True,
            check=True,
        )

        output = result.stdout
        assert "Lookup org:lib:2.0:lib.jar: 1 file(s)" in output
        assert "  org/lib/2.0/lib-2.0.jar" in output

    def test_no_match(self, script_path):
        """Test example with a revision that was never stored."""
        result = subprocess.run(
            [sys.executable, str(script_path), "--query", "3.*"],
            capture_output=True,
            text=True,
            check=True,
        )

        assert "Lookup com/example:lib:3.*:lib.jar: 0 file(s)" in result.stdout

"""
Tests for packaging metadata in pyproject.toml.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@pytest.fixture
def pyproject():
    with open(PYPROJECT, "rb") as f:
        return tomllib.load(f)


class TestPyproject:

    def test_version_read_from_version_file(self, pyproject):
        """Version has one source: the VERSION file."""
        assert "version" not in pyproject["project"]
        assert "version" in pyproject["project"]["dynamic"]
        assert pyproject["tool"]["setuptools"]["dynamic"]["version"] == {"file": "VERSION"}

    def test_no_top_level_modules_installed(self, pyproject):
        """Only the assetsync package is installed; sync.py stays a checkout launcher."""
        assert "py-modules" not in pyproject["tool"]["setuptools"]
        assert pyproject["tool"]["setuptools"]["packages"]["find"]["include"] == ["assetsync*"]

    def test_console_script(self, pyproject):
        assert pyproject["project"]["scripts"]["asset-sync"] == "assetsync.app:console_main"

"""Shared test fixtures."""

from pathlib import Path
from textwrap import dedent

import pytest
from pytest import MonkeyPatch

from appversion import Version


@pytest.fixture
def version() -> Version:
    """A version in the middle of every component range."""
    return Version(1, 2, 3)


@pytest.fixture
def pyproject_project(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Create a project whose pyproject.toml configures a current version."""
    (tmp_path / "pyproject.toml").write_text(
        dedent("""
        [project]
        name = "example"

        [tool.appversion]
        current = "1.4.2"
    """)
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def empty_project(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Change into a directory with no configuration at all."""
    monkeypatch.chdir(tmp_path)
    return tmp_path

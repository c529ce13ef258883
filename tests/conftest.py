"""Shared pytest fixtures for sortingtool tests."""

from __future__ import annotations

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def tmp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def input_file(tmp_dir: Path) -> Callable[[str], Path]:
    """Return a factory writing text to a fresh input file."""
    counter = 0

    def write(text: str) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_dir / f"input{counter}.txt"
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def output_file(tmp_dir: Path) -> Path:
    """Path for the -outputFile flag."""
    return tmp_dir / "output.txt"

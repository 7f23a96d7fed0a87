"""Shared test fixtures for linkmarker tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.fakes.documents import EXAMPLE_DOCUMENT


@pytest.fixture
def write_markdown(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a markdown file below ``tmp_path`` and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_document(write_markdown: Callable[[str, str], Path]) -> Path:
    """The five-link sample document written as ``example.md``."""
    return write_markdown("example.md", EXAMPLE_DOCUMENT)

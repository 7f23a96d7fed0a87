from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from linkmarker.contracts.exceptions import DiscoveryError
from linkmarker.discovery import discover_documents


def test_finds_markdown_files_in_sorted_walk_order(
    tmp_path: Path,
    write_markdown: Callable[[str, str], Path],
) -> None:
    for relative in ("b.md", "a.md", "sub/z.md", "sub/deeper/c.md", "notes.txt", "README.MD", "a.markdown"):
        write_markdown(relative, "")

    documents = discover_documents(tmp_path)

    assert [doc.path.relative_to(tmp_path).as_posix() for doc in documents] == [
        "a.md",
        "b.md",
        "sub/z.md",
        "sub/deeper/c.md",
    ]
    assert [doc.index for doc in documents] == [0, 1, 2, 3]


def test_display_path_keeps_the_root_as_given(
    tmp_path: Path,
    write_markdown: Callable[[str, str], Path],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    write_markdown("example.md", "")
    write_markdown("docs/guide.md", "")
    monkeypatch.chdir(tmp_path)

    documents = discover_documents(".")

    assert [doc.display_path for doc in documents] == ["./example.md", os.path.join(".", "docs", "guide.md")]


def test_empty_tree(tmp_path: Path) -> None:
    assert discover_documents(tmp_path) == []


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(DiscoveryError, match="not a directory"):
        discover_documents(tmp_path / "missing")


def test_file_root_raises(write_markdown: Callable[[str, str], Path]) -> None:
    path = write_markdown("single.md", "")

    with pytest.raises(DiscoveryError):
        discover_documents(path)

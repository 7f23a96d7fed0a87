"""Find the markdown documents under a root directory."""

from __future__ import annotations

import os
from pathlib import Path

from linkmarker.contracts.document import Document
from linkmarker.contracts.exceptions import DiscoveryError

MARKDOWN_SUFFIX = ".md"


def _raise_walk_error(error: OSError) -> None:
    raise DiscoveryError(f"failed to walk directory: {error}") from error


def discover_documents(root: str | Path) -> list[Document]:
    """Return every ``*.md`` file under *root* in sorted walk order.

    Display paths keep the root as given, so a root of ``.`` yields
    ``./guide.md``.
    """
    root_text = os.fspath(root)
    if not os.path.isdir(root_text):
        raise DiscoveryError(f"root is not a directory: {root_text}")

    documents: list[Document] = []
    for dirpath, dirnames, filenames in os.walk(root_text, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if os.path.splitext(filename)[1] != MARKDOWN_SUFFIX:
                continue
            display_path = os.path.join(dirpath, filename)
            documents.append(Document(path=Path(display_path), display_path=display_path, index=len(documents)))
    return documents

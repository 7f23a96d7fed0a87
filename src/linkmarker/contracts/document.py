"""Document and link occurrence contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel


class ReferenceStyle(StrEnum):
    """How a link destination was supplied in the source."""

    INLINE = "inline"
    AUTOLINK = "autolink"
    REFERENCE = "reference"


class Document(BaseModel):
    """A discovered markdown file."""

    path: Path
    display_path: str
    index: int = 0

    model_config = {"frozen": True}

    @property
    def directory(self) -> Path:
        return self.path.parent


class LinkOccurrence(BaseModel):
    """One link-bearing construct as written in a document.

    Reference-style occurrences carry their label in ``reference`` and leave
    ``destination`` empty; the dispatcher fills it in from the document's
    definitions. ``source`` keeps the construct as written (``[text][label]``)
    for broken reference reports.
    """

    text: str
    destination: str = ""
    line: int = 1
    image: bool = False
    style: ReferenceStyle = ReferenceStyle.INLINE
    reference: str | None = None
    source: str | None = None

    model_config = {"frozen": True}

    @property
    def is_reference(self) -> bool:
        return self.reference is not None


class ReferenceDefinition(BaseModel):
    """A ``[label]: destination`` declaration scoped to one document."""

    label: str
    destination: str
    title: str = ""
    line: int | None = None

    model_config = {"frozen": True}

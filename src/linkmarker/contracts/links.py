"""Classification and URL check result contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class LinkKind(StrEnum):
    REFERENCE = "reference"
    ABSOLUTE_URL = "absolute_url"
    MALFORMED_URL = "malformed_url"
    ABSOLUTE_PATH = "absolute_path"
    RELATIVE_PATH = "relative_path"


class ClassifiedLink(BaseModel):
    """A destination tagged with exactly one :class:`LinkKind`.

    ``reason`` is only set for ``MALFORMED_URL`` and holds the parse failure
    text shown in the report.
    """

    kind: LinkKind
    target: str
    reason: str | None = None

    model_config = {"frozen": True}


class UrlCheckResult(BaseModel):
    """Outcome of probing one distinct URL."""

    url: str
    ok: bool
    status_code: int | None = None
    error: str | None = None

    model_config = {"frozen": True}

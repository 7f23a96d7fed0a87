"""Finding and report contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class FindingKind(StrEnum):
    """Finding kinds. The value is the label printed in the report."""

    BROKEN_REFERENCE = "broken reference"
    BROKEN_URL = "broken url"
    MALFORMED_URL = "malformed URL"
    BROKEN_PATH = "broken path"
    ABSOLUTE_PATH = "absolute path"
    PARSE_FAILURE = "parse failure"


LABEL_WIDTH = max(len(kind.value) for kind in FindingKind)


class Finding(BaseModel):
    document: str
    kind: FindingKind
    detail: str
    message: str | None = None
    line: int | None = None

    model_config = {"frozen": True}

    def render(self) -> str:
        line = f"Found {self.kind.value:<{LABEL_WIDTH}} ({self.detail}) in {self.document}"
        if self.message:
            line += f": {self.message}"
        return line


class CheckReport(BaseModel):
    """All findings of one run, ordered by document then source position."""

    findings: list[Finding] = Field(default_factory=list)
    documents_checked: int = 0
    unreadable: list[str] = Field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        return bool(self.findings)

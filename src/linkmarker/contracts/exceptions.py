"""Exception hierarchy for linkmarker.

Link-level problems are never raised; they become
:class:`~linkmarker.contracts.finding.Finding` values. Exceptions are reserved
for configuration problems and for documents that cannot be read or parsed.
"""

from __future__ import annotations

from pathlib import Path


class LinkMarkerError(Exception):
    """Base exception for all linkmarker errors."""


class ConfigError(LinkMarkerError):
    """Raised when checker options fail validation."""


class DiscoveryError(LinkMarkerError):
    """Raised when the document tree cannot be walked."""


class DocumentReadError(LinkMarkerError):
    """Raised when a document file cannot be opened or read.

    Attributes:
        path: The document that failed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed reading {path}: {reason}")


class DocumentParseError(LinkMarkerError):
    """Raised when a document's text cannot be decoded or parsed as CommonMark.

    Attributes:
        path: The document that failed.
        summary: Short description used as the finding detail.
        reason: Underlying error text.
    """

    def __init__(self, path: Path, summary: str, reason: str) -> None:
        self.path = path
        self.summary = summary
        self.reason = reason
        super().__init__(f"failed parsing {path}: {reason}")

"""Public contracts for linkmarker."""

from linkmarker.contracts.config import CheckerConfig
from linkmarker.contracts.document import Document, LinkOccurrence, ReferenceDefinition, ReferenceStyle
from linkmarker.contracts.exceptions import (
    ConfigError,
    DiscoveryError,
    DocumentParseError,
    DocumentReadError,
    LinkMarkerError,
)
from linkmarker.contracts.finding import CheckReport, Finding, FindingKind
from linkmarker.contracts.links import ClassifiedLink, LinkKind, UrlCheckResult

__all__ = [
    "CheckReport",
    "CheckerConfig",
    "ClassifiedLink",
    "ConfigError",
    "DiscoveryError",
    "Document",
    "DocumentParseError",
    "DocumentReadError",
    "Finding",
    "FindingKind",
    "LinkKind",
    "LinkMarkerError",
    "LinkOccurrence",
    "ReferenceDefinition",
    "ReferenceStyle",
    "UrlCheckResult",
]

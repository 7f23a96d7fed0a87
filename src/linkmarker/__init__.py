"""Public API surface for linkmarker."""

from linkmarker.version import package_version

__version__ = package_version()

from linkmarker.classify import classify_destination, classify_occurrence
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
from linkmarker.discovery import discover_documents
from linkmarker.engine.progress import CheckProgress
from linkmarker.parsing import ExtractedLinks, LinkExtractor, normalize_label
from linkmarker.report import exit_code_for, render_findings
from linkmarker.sdk import LinkMarker

__all__ = [
    "CheckProgress",
    "CheckReport",
    "CheckerConfig",
    "ClassifiedLink",
    "ConfigError",
    "DiscoveryError",
    "Document",
    "DocumentParseError",
    "DocumentReadError",
    "ExtractedLinks",
    "Finding",
    "FindingKind",
    "LinkExtractor",
    "LinkKind",
    "LinkMarker",
    "LinkMarkerError",
    "LinkOccurrence",
    "ReferenceDefinition",
    "ReferenceStyle",
    "UrlCheckResult",
    "classify_destination",
    "classify_occurrence",
    "discover_documents",
    "exit_code_for",
    "normalize_label",
    "render_findings",
]

"""CommonMark parsing: link extraction and reference labels."""

from linkmarker.parsing.extractor import ExtractedLinks, LinkExtractor, build_parser, read_document
from linkmarker.parsing.labels import Cell, UnresolvedReference, UnresolvedReferenceScanner, normalize_label

__all__ = [
    "Cell",
    "ExtractedLinks",
    "LinkExtractor",
    "UnresolvedReference",
    "UnresolvedReferenceScanner",
    "build_parser",
    "normalize_label",
    "read_document",
]

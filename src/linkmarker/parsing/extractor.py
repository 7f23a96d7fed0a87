"""CommonMark link extraction built on markdown-it-py."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

from linkmarker.contracts.document import Document, LinkOccurrence, ReferenceDefinition, ReferenceStyle
from linkmarker.contracts.exceptions import DocumentParseError, DocumentReadError
from linkmarker.parsing.labels import Cell, UnresolvedReferenceScanner, normalize_label

_LOG = logging.getLogger(__name__)

# Inline tokens that only carry markup around other inline content.
_MARKUP_TOKENS = frozenset({"em_open", "em_close", "strong_open", "strong_close", "s_open", "s_close"})


def _keep_destination(url: str) -> str:
    return url


def _accept_destination(url: str) -> bool:
    return True


def build_parser() -> MarkdownIt:
    """Return a CommonMark parser that reports destinations as written."""
    md = MarkdownIt("commonmark", {"store_labels": True}).enable("table")
    # Escaped brackets must stay separate text_special tokens.
    md.disable("text_join")
    md.normalizeLink = _keep_destination  # type: ignore[method-assign]
    md.normalizeLinkText = _keep_destination  # type: ignore[method-assign]
    md.validateLink = _accept_destination  # type: ignore[method-assign]
    return md


@dataclass
class ExtractedLinks:
    """Links and reference definitions of a single document."""

    occurrences: list[LinkOccurrence] = field(default_factory=list)
    definitions: dict[str, ReferenceDefinition] = field(default_factory=dict)

    def lookup(self, label: str) -> ReferenceDefinition | None:
        return self.definitions.get(normalize_label(label))


def read_document(document: Document) -> str:
    """Read and decode a document, separating I/O failures from bad content."""
    try:
        raw = document.path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(document.path, exc.strerror or str(exc)) from exc
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DocumentParseError(document.path, "invalid UTF-8", str(exc)) from exc


def _plain_text(tokens: Sequence[Token]) -> str:
    parts: list[str] = []
    for token in tokens:
        if token.type in {"text", "text_special", "code_inline"}:
            parts.append(token.content)
        elif token.type == "image":
            parts.append(token.content)
        elif token.type in {"softbreak", "hardbreak"}:
            parts.append(" ")
    return "".join(parts)


def _link_text(children: Sequence[Token], open_index: int) -> str:
    depth = 0
    for index in range(open_index, len(children)):
        token = children[index]
        if token.type == "link_open":
            depth += 1
        elif token.type == "link_close":
            depth -= 1
            if depth == 0:
                return _plain_text(children[open_index + 1 : index])
    return _plain_text(children[open_index + 1 :])


def _cell_value(token: Token) -> str:
    if token.type == "code_inline":
        return f"{token.markup}{token.content}{token.markup}"
    if token.type in _MARKUP_TOKENS:
        return token.markup
    if token.type == "text_special":
        return token.markup or token.content
    return token.content


class LinkExtractor:
    """Parse a document into link occurrences and reference definitions.

    Args:
        include_images: Whether ``![alt](dest)`` destinations are extracted.
    """

    def __init__(self, *, include_images: bool = True) -> None:
        self._include_images = include_images
        self._md = build_parser()

    def extract(self, text: str, *, path: Path | None = None) -> ExtractedLinks:
        env: dict[str, Any] = {}
        try:
            tokens = self._md.parse(text, env)
        except RecursionError as exc:
            raise DocumentParseError(path or Path("<text>"), "nesting too deep", str(exc)) from exc

        extracted = ExtractedLinks(definitions=self._definitions(env))
        list_item_pending = False
        for token in tokens:
            if token.type == "list_item_open":
                list_item_pending = True
            elif token.type == "inline":
                extracted.occurrences.extend(self._inline(token, task_item=list_item_pending))
                list_item_pending = False
            elif token.type not in {"paragraph_open", "paragraph_close"}:
                list_item_pending = False
        _LOG.debug(
            "extracted %d link(s) and %d definition(s) from %s",
            len(extracted.occurrences),
            len(extracted.definitions),
            path or "<text>",
        )
        return extracted

    @staticmethod
    def _definitions(env: dict[str, Any]) -> dict[str, ReferenceDefinition]:
        definitions: dict[str, ReferenceDefinition] = {}
        for key, payload in env.get("references", {}).items():
            label = normalize_label(key)
            if label in definitions:
                continue
            line_map = payload.get("map")
            definitions[label] = ReferenceDefinition(
                label=label,
                destination=payload.get("href", ""),
                title=payload.get("title", ""),
                line=line_map[0] + 1 if line_map else None,
            )
        return definitions

    def _inline(self, inline: Token, *, task_item: bool) -> list[LinkOccurrence]:
        base_line = inline.map[0] + 1 if inline.map else 1
        children = inline.children or []
        positioned: list[tuple[int, LinkOccurrence]] = []
        cells: list[Cell] = []
        line = base_line
        link_depth = 0

        for index, child in enumerate(children):
            if child.type in {"softbreak", "hardbreak"}:
                line += 1
                if link_depth == 0:
                    cells.append(Cell(" ", line=line))
                continue
            if child.type == "link_open":
                if link_depth == 0:
                    positioned.append((len(cells), self._link(child, children, index, line)))
                    cells.append(Cell("", barrier=True, line=line))
                link_depth += 1
                continue
            if child.type == "link_close":
                link_depth -= 1
                continue
            if child.type == "image":
                if self._include_images:
                    positioned.append((len(cells), self._image(child, line)))
                if link_depth == 0:
                    cells.append(Cell("", barrier=True, line=line))
                continue
            if link_depth > 0:
                continue
            if child.type == "text":
                cells.extend(Cell(char, literal=True, line=line) for char in child.content)
            else:
                cells.append(Cell(_cell_value(child), line=line))

        scanner = UnresolvedReferenceScanner(task_item=task_item)
        for unresolved in scanner.scan(cells):
            if unresolved.image and not self._include_images:
                continue
            positioned.append(
                (
                    unresolved.position,
                    LinkOccurrence(
                        text=unresolved.text,
                        line=unresolved.line,
                        image=unresolved.image,
                        style=ReferenceStyle.REFERENCE,
                        reference=unresolved.label,
                        source=unresolved.source,
                    ),
                )
            )

        positioned.sort(key=lambda entry: entry[0])
        return [occurrence for _, occurrence in positioned]

    @staticmethod
    def _link(token: Token, children: Sequence[Token], index: int, line: int) -> LinkOccurrence:
        href = str(token.attrGet("href") or "")
        text = _link_text(children, index)
        if token.markup == "autolink":
            return LinkOccurrence(text=text, destination=href, line=line, style=ReferenceStyle.AUTOLINK)
        label = token.meta.get("label")
        if label:
            return LinkOccurrence(
                text=text,
                destination=href,
                line=line,
                style=ReferenceStyle.REFERENCE,
                reference=label,
                source=f"[{text}]",
            )
        return LinkOccurrence(text=text, destination=href, line=line)

    @staticmethod
    def _image(token: Token, line: int) -> LinkOccurrence:
        src = str(token.attrGet("src") or "")
        label = token.meta.get("label")
        if label:
            return LinkOccurrence(
                text=token.content,
                destination=src,
                line=line,
                image=True,
                style=ReferenceStyle.REFERENCE,
                reference=label,
                source=f"![{token.content}]",
            )
        return LinkOccurrence(text=token.content, destination=src, line=line, image=True)

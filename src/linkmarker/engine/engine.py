"""Core link check pipeline."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from linkmarker.contracts.document import Document
from linkmarker.contracts.exceptions import DocumentParseError, DocumentReadError
from linkmarker.contracts.finding import CheckReport, Finding, FindingKind
from linkmarker.engine.coordinator import UrlCheckCoordinator
from linkmarker.engine.dispatcher import LinkDispatcher, Outcome, PendingUrlFinding
from linkmarker.engine.progress import FETCH_PHASE, SCAN_PHASE, CheckProgress, NullCheckProgress
from linkmarker.parsing.extractor import LinkExtractor, read_document
from linkmarker.validators.paths import PathValidator

_LOG = logging.getLogger(__name__)


class CheckEngine:
    """Scan documents in order, then wait for URL checks and assemble the report.

    Local checks run while each document is scanned. URL checks are handed
    to the coordinator and only awaited after every document is scanned, so
    report order never depends on which request finishes first.
    """

    def __init__(
        self,
        *,
        extractor: LinkExtractor,
        path_validator: PathValidator,
        coordinator: UrlCheckCoordinator | None = None,
        progress: CheckProgress | None = None,
    ) -> None:
        self._extractor = extractor
        self._path_validator = path_validator
        self._coordinator = coordinator
        self._progress = progress or NullCheckProgress()

    async def check(self, documents: Sequence[Document]) -> CheckReport:
        outcomes: list[list[Outcome]] = []
        unreadable: list[str] = []

        self._progress.phase_start(SCAN_PHASE, total=len(documents))
        if self._coordinator is not None:
            self._progress.phase_start(FETCH_PHASE)
        for document in documents:
            try:
                outcomes.append(self._scan(document))
            except DocumentReadError as exc:
                _LOG.error("%s", exc)
                unreadable.append(document.display_path)
            self._progress.item_done(SCAN_PHASE)
            # Let scheduled URL checks start while scanning continues.
            await asyncio.sleep(0)
        self._progress.phase_done(SCAN_PHASE)

        if self._coordinator is not None:
            await self._coordinator.drain()
            _LOG.debug("checked %d distinct URL(s)", self._coordinator.distinct_urls)
            self._progress.phase_done(FETCH_PHASE)

        findings: list[Finding] = []
        for document_outcomes in outcomes:
            for outcome in document_outcomes:
                if isinstance(outcome, PendingUrlFinding):
                    outcome = await outcome.resolve()
                if outcome is not None:
                    findings.append(outcome)

        return CheckReport(
            findings=findings,
            documents_checked=len(outcomes),
            unreadable=unreadable,
        )

    def _scan(self, document: Document) -> list[Outcome]:
        _LOG.debug("scanning %s", document.display_path)
        try:
            text = read_document(document)
            links = self._extractor.extract(text, path=document.path)
        except DocumentParseError as exc:
            return [
                Finding(
                    document=document.display_path,
                    kind=FindingKind.PARSE_FAILURE,
                    detail=exc.summary,
                    message=exc.reason,
                )
            ]
        dispatcher = LinkDispatcher(
            document,
            links,
            path_validator=self._path_validator,
            coordinator=self._coordinator,
        )
        return dispatcher.dispatch_all()

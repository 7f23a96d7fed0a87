"""Route each link occurrence to the validation it needs."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from linkmarker.classify import classify_destination, classify_occurrence
from linkmarker.contracts.document import Document, LinkOccurrence
from linkmarker.contracts.finding import Finding, FindingKind
from linkmarker.contracts.links import LinkKind, UrlCheckResult
from linkmarker.engine.coordinator import UrlCheckCoordinator
from linkmarker.parsing.extractor import ExtractedLinks
from linkmarker.validators.paths import PathValidator


@dataclass(frozen=True)
class PendingUrlFinding:
    """A URL finding that is known only once the shared check completes."""

    document: Document
    occurrence: LinkOccurrence
    destination: str
    check: asyncio.Task[UrlCheckResult]

    async def resolve(self) -> Finding | None:
        result = await self.check
        if result.ok:
            return None
        return Finding(
            document=self.document.display_path,
            kind=FindingKind.BROKEN_URL,
            detail=_detail(self.occurrence, self.destination),
            message=result.error,
            line=self.occurrence.line,
        )


Outcome = Finding | PendingUrlFinding | None


def _detail(occurrence: LinkOccurrence, destination: str) -> str:
    return f"{occurrence.text} -> {destination}"


class LinkDispatcher:
    """Validate the occurrences of one document against its own definitions.

    A dispatcher is bound to a single document so reference definitions can
    never resolve links in another file. ``coordinator`` is ``None`` when HTTP
    checks are disabled; well-formed URLs then pass without a request.
    """

    def __init__(
        self,
        document: Document,
        links: ExtractedLinks,
        *,
        path_validator: PathValidator,
        coordinator: UrlCheckCoordinator | None,
    ) -> None:
        self._document = document
        self._links = links
        self._path_validator = path_validator
        self._coordinator = coordinator

    def dispatch_all(self) -> list[Outcome]:
        return [self.dispatch(occurrence) for occurrence in self._links.occurrences]

    def dispatch(self, occurrence: LinkOccurrence) -> Outcome:
        destination = occurrence.destination
        classified = classify_occurrence(occurrence)
        if classified.kind == LinkKind.REFERENCE:
            definition = self._links.lookup(classified.target)
            if definition is None:
                return self._finding(
                    occurrence,
                    FindingKind.BROKEN_REFERENCE,
                    occurrence.source or f"[{classified.target}]",
                )
            destination = definition.destination
            classified = classify_destination(destination)

        if classified.kind == LinkKind.ABSOLUTE_URL:
            if self._coordinator is None:
                return None
            return PendingUrlFinding(
                document=self._document,
                occurrence=occurrence,
                destination=destination,
                check=self._coordinator.submit(destination),
            )
        if classified.kind == LinkKind.MALFORMED_URL:
            return self._finding(
                occurrence,
                FindingKind.MALFORMED_URL,
                _detail(occurrence, destination),
                message=classified.reason,
            )
        if classified.kind == LinkKind.ABSOLUTE_PATH:
            return self._finding(occurrence, FindingKind.ABSOLUTE_PATH, _detail(occurrence, destination))

        check = self._path_validator.check(destination, self._document.directory)
        if check.exists:
            return None
        return self._finding(
            occurrence,
            FindingKind.BROKEN_PATH,
            _detail(occurrence, destination),
            message=check.error,
        )

    def _finding(
        self,
        occurrence: LinkOccurrence,
        kind: FindingKind,
        detail: str,
        *,
        message: str | None = None,
    ) -> Finding:
        return Finding(
            document=self._document.display_path,
            kind=kind,
            detail=detail,
            message=message,
            line=occurrence.line,
        )

"""Bounded, deduplicating scheduler for URL checks."""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import urldefrag

from linkmarker.contracts.links import UrlCheckResult
from linkmarker.engine.progress import FETCH_PHASE, CheckProgress, NullCheckProgress
from linkmarker.validators.urls import UrlValidator

_LOG = logging.getLogger(__name__)


def url_cache_key(url: str) -> str:
    """Fragments never reach the server, so ``a#x`` and ``a#y`` share one check."""
    return urldefrag(url).url


class UrlCheckCoordinator:
    """Run each distinct URL check once, with at most *max_concurrent* in flight.

    The first ``submit`` for a URL schedules a task; later submissions get the
    same task back. All bookkeeping happens on the event loop thread, so the
    insert-if-absent needs no lock and nothing is held across the request.
    """

    def __init__(
        self,
        validator: UrlValidator,
        *,
        max_concurrent: int,
        progress: CheckProgress | None = None,
    ) -> None:
        self._validator = validator
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._progress = progress or NullCheckProgress()
        self._checks: dict[str, asyncio.Task[UrlCheckResult]] = {}

    @property
    def distinct_urls(self) -> int:
        return len(self._checks)

    def submit(self, url: str) -> asyncio.Task[UrlCheckResult]:
        key = url_cache_key(url)
        task = self._checks.get(key)
        if task is None:
            task = asyncio.create_task(self._guarded(key), name=f"check {key}")
            self._checks[key] = task
        else:
            _LOG.debug("reusing pending check for %s", key)
        return task

    async def drain(self) -> None:
        """Wait for every submitted check, including ones submitted while waiting."""
        while True:
            pending = [task for task in self._checks.values() if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending)

    async def _guarded(self, url: str) -> UrlCheckResult:
        try:
            async with self._semaphore:
                return await self._validator.check(url)
        finally:
            self._progress.item_done(FETCH_PHASE)

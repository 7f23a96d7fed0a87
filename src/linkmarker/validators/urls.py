"""HTTP reachability checks for absolute URLs."""

from __future__ import annotations

import logging

import httpx

from linkmarker.contracts.config import CheckerConfig
from linkmarker.contracts.links import UrlCheckResult

_LOG = logging.getLogger(__name__)

_PROBED_SCHEMES = frozenset({"http", "https"})
# Servers that refuse HEAD usually answer with one of these.
_HEAD_REJECTED_STATUS_CODES = frozenset({405, 501})


def create_http_client(config: CheckerConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        follow_redirects=True,
        max_redirects=config.max_redirects,
        timeout=config.timeout,
        headers={"User-Agent": config.user_agent},
    )


def _error_text(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class UrlValidator:
    """Probe a single URL with HEAD, falling back to GET.

    Transport failures are folded into the returned :class:`UrlCheckResult`;
    nothing is raised and nothing is retried apart from redirects.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def check(self, url: str) -> UrlCheckResult:
        scheme = url.partition(":")[0].lower()
        if scheme not in _PROBED_SCHEMES:
            return UrlCheckResult(url=url, ok=True)

        _LOG.debug("HEAD %s", url)
        try:
            response = await self._client.head(url)
            if response.status_code in _HEAD_REJECTED_STATUS_CODES:
                _LOG.warning("HEAD rejected with %d for %s; retrying with GET", response.status_code, url)
                async with self._client.stream("GET", url) as response:
                    pass
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            # IDNA host decoding raises UnicodeError subclasses outside httpx.
            _LOG.debug("request to %s failed: %r", url, exc)
            return UrlCheckResult(url=url, ok=False, error=_error_text(exc))

        status = response.status_code
        if 200 <= status < 400:
            return UrlCheckResult(url=url, ok=True, status_code=status)
        return UrlCheckResult(
            url=url,
            ok=False,
            status_code=status,
            error=f"{status} {response.reason_phrase}".strip(),
        )

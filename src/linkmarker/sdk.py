"""SDK composition root for linkmarker."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from linkmarker.contracts.config import CheckerConfig
from linkmarker.contracts.document import Document
from linkmarker.contracts.exceptions import ConfigError
from linkmarker.contracts.finding import CheckReport
from linkmarker.discovery import discover_documents
from linkmarker.engine import CheckEngine, UrlCheckCoordinator
from linkmarker.engine.progress import CheckProgress
from linkmarker.parsing import LinkExtractor
from linkmarker.validators import PathValidator, UrlValidator, create_http_client


class LinkMarker:
    """linkmarker SDK public API.

    ``http_client`` lets callers supply their own ``httpx.AsyncClient`` (for
    example one built on ``httpx.MockTransport``); the caller then owns its
    lifetime. Otherwise a client is created per :meth:`check` call and closed
    afterwards.
    """

    def __init__(
        self,
        config: CheckerConfig,
        *,
        progress: CheckProgress | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._progress = progress
        self._http_client = http_client

    @classmethod
    def from_options(
        cls,
        *,
        progress: CheckProgress | None = None,
        http_client: httpx.AsyncClient | None = None,
        **options: Any,
    ) -> LinkMarker:
        try:
            config = CheckerConfig(**options)
        except ValidationError as exc:
            raise ConfigError(f"invalid options: {exc}") from exc
        return cls(config, progress=progress, http_client=http_client)

    @property
    def config(self) -> CheckerConfig:
        return self._config

    def discover(self) -> list[Document]:
        return discover_documents(self._config.root)

    async def check(self, documents: Sequence[Document] | None = None) -> CheckReport:
        """Check *documents*, or every document under the configured root."""
        if documents is None:
            documents = self.discover()
        extractor = LinkExtractor(include_images=self._config.check_images)

        if not self._config.check_http:
            engine = CheckEngine(extractor=extractor, path_validator=PathValidator(), progress=self._progress)
            return await engine.check(documents)

        client = self._http_client or create_http_client(self._config)
        try:
            coordinator = UrlCheckCoordinator(
                UrlValidator(client),
                max_concurrent=self._config.max_concurrent,
                progress=self._progress,
            )
            engine = CheckEngine(
                extractor=extractor,
                path_validator=PathValidator(),
                coordinator=coordinator,
                progress=self._progress,
            )
            return await engine.check(documents)
        finally:
            if self._http_client is None:
                await client.aclose()

"""Tests for the LinkMarker SDK facade."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from linkmarker import LinkMarker
from linkmarker.contracts.config import CheckerConfig
from linkmarker.contracts.exceptions import ConfigError, DiscoveryError
from linkmarker.contracts.finding import FindingKind
from tests.fakes.http import FakeWeb
from tests.fakes.progress import RecordingProgress


class TestFromOptions:
    def test_builds_config(self, tmp_path: Path) -> None:
        marker = LinkMarker.from_options(root=tmp_path, max_concurrent=2)

        assert marker.config.root == tmp_path
        assert marker.config.max_concurrent == 2
        assert marker.config.check_http is True

    @pytest.mark.parametrize(
        "options",
        [
            {"max_concurrent": 0},
            {"timeout": 0},
            {"max_redirects": -1},
            {"user_agent": "   "},
        ],
    )
    def test_invalid_options_raise_config_error(self, options: dict[str, object]) -> None:
        with pytest.raises(ConfigError, match="invalid options"):
            LinkMarker.from_options(**options)

    def test_config_is_frozen(self) -> None:
        config = CheckerConfig()

        with pytest.raises(ValueError):
            config.timeout = 1.0  # type: ignore[misc]


@pytest.mark.asyncio
async def test_check_uses_injected_client_and_leaves_it_open(
    tmp_path: Path,
    example_document: Path,
) -> None:
    web = FakeWeb(routes={"www.acrawford.com/404": 404})
    client = web.client()
    marker = LinkMarker(CheckerConfig(root=tmp_path), http_client=client)

    report = await marker.check()

    assert [f.kind for f in report.findings] == [
        FindingKind.BROKEN_REFERENCE,
        FindingKind.BROKEN_URL,
        FindingKind.MALFORMED_URL,
        FindingKind.BROKEN_PATH,
        FindingKind.ABSOLUTE_PATH,
    ]
    assert web.requests_for("www.acrawford.com/404") == 1
    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_skip_http_makes_no_requests(tmp_path: Path, example_document: Path) -> None:
    web = FakeWeb(routes={"www.acrawford.com/404": 404})
    async with web.client() as client:
        marker = LinkMarker(CheckerConfig(root=tmp_path, check_http=False), http_client=client)
        report = await marker.check()

    assert web.calls == []
    assert FindingKind.BROKEN_URL not in {f.kind for f in report.findings}
    assert len(report.findings) == 4


@pytest.mark.asyncio
async def test_owned_client_is_closed(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    created: list[httpx.AsyncClient] = []

    def fake_create(config: CheckerConfig) -> httpx.AsyncClient:
        client = FakeWeb().client(max_redirects=config.max_redirects)
        created.append(client)
        return client

    monkeypatch.setattr("linkmarker.sdk.create_http_client", fake_create)

    await LinkMarker(CheckerConfig(root=tmp_path)).check()

    assert len(created) == 1
    assert created[0].is_closed


@pytest.mark.asyncio
async def test_images_can_be_excluded(tmp_path: Path, write_markdown: Callable[[str, str], Path]) -> None:
    write_markdown("doc.md", "![logo](missing.png) [page](missing.md)")

    with_images = await LinkMarker(CheckerConfig(root=tmp_path, check_http=False)).check()
    without_images = await LinkMarker(CheckerConfig(root=tmp_path, check_http=False, check_images=False)).check()

    assert [f.detail for f in with_images.findings] == ["logo -> missing.png", "page -> missing.md"]
    assert [f.detail for f in without_images.findings] == ["page -> missing.md"]


@pytest.mark.asyncio
async def test_repeated_checks_give_the_same_report(tmp_path: Path, example_document: Path) -> None:
    web = FakeWeb(routes={"www.acrawford.com/404": 404})
    async with web.client() as client:
        marker = LinkMarker(CheckerConfig(root=tmp_path), http_client=client)
        first = await marker.check()
        second = await marker.check()

    assert first == second


@pytest.mark.asyncio
async def test_explicit_documents_skip_discovery(tmp_path: Path, write_markdown: Callable[[str, str], Path]) -> None:
    write_markdown("a.md", "[x](nope.md)")
    write_markdown("b.md", "[y](nope.md)")
    marker = LinkMarker(CheckerConfig(root=tmp_path, check_http=False))
    documents = marker.discover()

    report = await marker.check(documents[1:])

    assert [f.detail for f in report.findings] == ["y -> nope.md"]


@pytest.mark.asyncio
async def test_progress_is_forwarded(tmp_path: Path, example_document: Path) -> None:
    progress = RecordingProgress()
    async with FakeWeb().client() as client:
        await LinkMarker(CheckerConfig(root=tmp_path), progress=progress, http_client=client).check()

    assert progress.count("item", "Scan") == 1
    assert progress.count("item", "Fetch") == 1


@pytest.mark.asyncio
async def test_missing_root_raises_discovery_error(tmp_path: Path) -> None:
    with pytest.raises(DiscoveryError):
        await LinkMarker(CheckerConfig(root=tmp_path / "missing")).check()

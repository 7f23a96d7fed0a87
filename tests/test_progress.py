"""Tests for RichCheckProgress and NullCheckProgress."""

from __future__ import annotations

import io

from rich.console import Console

from linkmarker.cli.progress import RichCheckProgress
from linkmarker.engine.progress import FETCH_PHASE, SCAN_PHASE, CheckProgress, NullCheckProgress


def _quiet_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False)


class TestNullCheckProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(NullCheckProgress, CheckProgress)

    def test_phase_lifecycle_is_noop(self) -> None:
        progress = NullCheckProgress()
        progress.phase_start(SCAN_PHASE, total=5)
        progress.item_done(SCAN_PHASE)
        progress.phase_done(SCAN_PHASE)


class TestRichCheckProgress:
    def test_context_manager(self) -> None:
        progress = RichCheckProgress(_quiet_console())
        with progress as p:
            assert p is progress

    def test_determinate_phase_completes(self) -> None:
        with RichCheckProgress(_quiet_console()) as progress:
            progress.phase_start(SCAN_PHASE, total=3)
            progress.item_done(SCAN_PHASE)
            progress.phase_done(SCAN_PHASE)
            task = progress._progress.tasks[0]

        assert task.completed == 3

    def test_indeterminate_phase_gets_total_when_done(self) -> None:
        with RichCheckProgress(_quiet_console()) as progress:
            progress.phase_start(FETCH_PHASE)
            progress.item_done(FETCH_PHASE)
            progress.item_done(FETCH_PHASE)
            progress.phase_done(FETCH_PHASE)
            task = progress._progress.tasks[0]

        assert task.total == 2
        assert task.completed == 2

    def test_unknown_phase_is_noop(self) -> None:
        with RichCheckProgress(_quiet_console()) as progress:
            progress.item_done("Unknown")
            progress.phase_done("Unknown")

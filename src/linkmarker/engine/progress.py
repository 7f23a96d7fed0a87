"""Progress reporting protocol for the check pipeline.

The engine emits phase lifecycle events. Consumers such as the CLI's Rich
progress display implement ``CheckProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

SCAN_PHASE = "Scan"
FETCH_PHASE = "Fetch"


class CheckProgress(ABC):
    """Observer interface for check pipeline progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is starting. *total* is ``None`` for indeterminate phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None:
        """One item within *phase* has completed."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished."""
        ...  # pragma: no cover


class NullCheckProgress(CheckProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

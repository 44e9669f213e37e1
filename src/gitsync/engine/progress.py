"""Sync phase events.

A setup run reports ``Auth`` and ``Discover``; export reports ``Capture``
followed by ``Save`` (local) or ``Upload`` (gist); import reports
``Download`` (gist only), ``Apply`` and ``Extensions``. Sync is an export
followed by an import.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal

SyncPhase = Literal["Auth", "Discover", "Capture", "Save", "Upload", "Download", "Apply", "Extensions"]


class SyncProgress(ABC):
    """Receives phase transitions from the orchestrator, snapshot service and reconciler."""

    @abstractmethod
    def phase_start(self, phase: SyncPhase, total: int | None = None) -> None:
        """*total* counts settings or extensions, ``None`` when not countable."""

    @abstractmethod
    def item_done(self, phase: SyncPhase) -> None: ...

    @abstractmethod
    def phase_done(self, phase: SyncPhase) -> None: ...

    @abstractmethod
    def phase_error(self, phase: SyncPhase, error: BaseException) -> None: ...


class NullSyncProgress(SyncProgress):
    def phase_start(self, phase: SyncPhase, total: int | None = None) -> None:
        pass

    def item_done(self, phase: SyncPhase) -> None:
        pass

    def phase_done(self, phase: SyncPhase) -> None:
        pass

    def phase_error(self, phase: SyncPhase, error: BaseException) -> None:
        pass

"""Rich-based phase log for sync operations."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console

from gitsync.engine.progress import SyncPhase, SyncProgress


class RichSyncProgress(SyncProgress):
    """Prints one line per phase transition.

    Output is plain console lines and may interleave with interactive prompts.
    """

    _PHASE_LABELS: ClassVar[dict[SyncPhase, str]] = {
        "Auth": "[cyan]Auth[/]",
        "Discover": "[cyan]Discover[/]",
        "Capture": "[blue]Capture[/]",
        "Save": "[green]Save[/]",
        "Upload": "[green]Upload[/]",
        "Download": "[green]Download[/]",
        "Apply": "[magenta]Apply[/]",
        "Extensions": "[magenta]Extensions[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._totals: dict[SyncPhase, int | None] = {}
        self._done: dict[SyncPhase, int] = {}

    def _label(self, phase: SyncPhase) -> str:
        return self._PHASE_LABELS.get(phase, phase)

    def phase_start(self, phase: SyncPhase, total: int | None = None) -> None:
        self._totals[phase] = total
        self._done[phase] = 0
        suffix = f" ({total})" if total else ""
        self._console.print(f"[dim]…[/dim] {self._label(phase)}{suffix}")

    def item_done(self, phase: SyncPhase) -> None:
        self._done[phase] = self._done.get(phase, 0) + 1

    def phase_done(self, phase: SyncPhase) -> None:
        total = self._totals.get(phase)
        suffix = f" {self._done.get(phase, 0)}/{total}" if total else ""
        self._console.print(f"[green]✓[/green] {self._label(phase)}{suffix}")

    def phase_error(self, phase: SyncPhase, error: BaseException) -> None:
        self._console.print(f"[red]✗[/red] {self._label(phase)}: {error}")

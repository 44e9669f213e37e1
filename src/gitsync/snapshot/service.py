"""Snapshot capture and application."""

from __future__ import annotations

import logging

from gitsync.contracts.exceptions import HostError
from gitsync.contracts.host import EditorHost
from gitsync.contracts.snapshot import ConfigSnapshot
from gitsync.contracts.sync import ApplyResult
from gitsync.engine.progress import NullSyncProgress, SyncProgress
from gitsync.engine.reconciler import ExtensionReconciler
from gitsync.persistence.local_store import LocalStore
from gitsync.snapshot.allowlist import partition_settings

_LOG = logging.getLogger(__name__)


class SnapshotService:
    def __init__(
        self,
        *,
        host: EditorHost,
        artifacts: LocalStore,
        reconciler: ExtensionReconciler,
        progress: SyncProgress | None = None,
    ) -> None:
        self._host = host
        self._artifacts = artifacts
        self._reconciler = reconciler
        self._progress = progress or NullSyncProgress()

    async def capture(self) -> ConfigSnapshot:
        """Read the current configuration. Has no side effects."""
        self._progress.phase_start("Capture")
        try:
            settings = await self._host.read_settings()
            extensions = await self._host.installed_extensions()
            snapshot = ConfigSnapshot(
                settings=settings,
                keybindings=self._artifacts.read_keybindings(),
                extensions=sorted(extensions),
                workspace_state=self._artifacts.read_workspace_state(),
            )
        except Exception as exc:
            self._progress.phase_error("Capture", exc)
            raise
        self._progress.phase_done("Capture")
        return snapshot

    async def apply(self, snapshot: ConfigSnapshot) -> ApplyResult:
        """Apply *snapshot* to this machine.

        Settings are applied key by key and only within allowed namespaces; a
        key the host rejects is logged and skipped. Keybindings and workspace
        state are replaced wholesale, then extensions are reconciled.
        """
        applicable, skipped = partition_settings(snapshot.settings)
        for key in skipped:
            _LOG.info("Skipping setting outside allowed namespaces: %s", key)

        self._progress.phase_start("Apply", total=len(applicable))
        applied: list[str] = []
        failed: list[str] = []
        for key, value in applicable.items():
            try:
                await self._host.update_setting(key, value)
                applied.append(key)
            except HostError as exc:
                _LOG.warning("Skipping invalid configuration key %s: %s", key, exc)
                failed.append(key)
            self._progress.item_done("Apply")

        self._artifacts.write_keybindings(list(snapshot.keybindings))
        if snapshot.workspace_state is not None:
            self._artifacts.write_workspace_state(snapshot.workspace_state)
        self._progress.phase_done("Apply")

        extensions = await self._reconciler.reconcile(snapshot.extensions)
        return ApplyResult(applied=applied, skipped=skipped, failed=failed, extensions=extensions)

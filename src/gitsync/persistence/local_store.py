"""Filesystem snapshot store used when no remote gist is configured."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import JsonValue, ValidationError

from gitsync.contracts.exceptions import StoreError
from gitsync.contracts.snapshot import ConfigSnapshot
from gitsync.contracts.sync import PersistResult
from gitsync.persistence.jsonc import loads_jsonc

_LOG = logging.getLogger(__name__)

SNAPSHOT_FILENAME = "cursor-settings.json"
WORKSPACE_STATE_DIR = ".cursor"
WORKSPACE_STATE_FILENAME = "workspace-state.json"


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


class LocalStore:
    """Snapshot plus the per-artifact files the snapshot is assembled from.

    The snapshot lives under the user's global directory; keybindings live in
    the editor's user directory and workspace state under the open workspace.
    """

    def __init__(self, *, global_dir: Path, keybindings_path: Path, workspace: Path | None = None) -> None:
        self._global_dir = global_dir
        self._keybindings_path = keybindings_path
        self._workspace = workspace

    @property
    def snapshot_path(self) -> Path:
        return self._global_dir / SNAPSHOT_FILENAME

    @property
    def workspace_state_path(self) -> Path | None:
        if self._workspace is None:
            return None
        return self._workspace / WORKSPACE_STATE_DIR / WORKSPACE_STATE_FILENAME

    @property
    def has_workspace(self) -> bool:
        return self._workspace is not None

    def read_snapshot(self) -> ConfigSnapshot | None:
        """Return the last exported snapshot, or ``None`` if nothing was exported yet."""
        path = self.snapshot_path
        if not path.exists():
            return None
        try:
            payload: Any = json.loads(path.read_text(encoding="utf-8"))
            return ConfigSnapshot.model_validate(payload)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise StoreError(f"invalid snapshot file: {path}") from exc

    def write_snapshot(self, snapshot: ConfigSnapshot) -> PersistResult:
        path = self.snapshot_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(snapshot.to_json(), encoding="utf-8")
        except OSError as exc:
            _LOG.warning("Writing snapshot to %s failed: %s", path, exc)
            return PersistResult.failure(f"failed to write snapshot: {path}", location=str(path))
        return PersistResult.success(str(path))

    def read_keybindings(self) -> list[JsonValue]:
        path = self._keybindings_path
        if not path.exists():
            return []
        try:
            payload = loads_jsonc(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"invalid keybindings file: {path}") from exc
        return payload if isinstance(payload, list) else []

    def write_keybindings(self, rules: list[JsonValue]) -> None:
        try:
            _write_json(self._keybindings_path, rules)
        except OSError as exc:
            raise StoreError(f"failed to write keybindings: {self._keybindings_path}") from exc

    def read_workspace_state(self) -> dict[str, JsonValue]:
        path = self.workspace_state_path
        if path is None or not path.exists():
            return {}
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"invalid workspace state file: {path}") from exc
        return payload if isinstance(payload, dict) else {}

    def write_workspace_state(self, state: dict[str, JsonValue]) -> bool:
        """Overwrite the workspace state file. Returns ``False`` when no workspace is open."""
        path = self.workspace_state_path
        if path is None:
            return False
        try:
            _write_json(path, state)
        except OSError as exc:
            raise StoreError(f"failed to write workspace state: {path}") from exc
        return True

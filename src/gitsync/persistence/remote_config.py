"""Credential and gist-binding record persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gitsync.contracts.config import RemoteConfig
from gitsync.contracts.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

CONFIG_FILENAME = "cursor-sync-config.json"
WORKSPACE_CONFIG_DIR = ".vscode"


def remote_config_path(*, global_dir: Path, workspace: Path | None) -> Path:
    """Workspace-scoped path when a workspace is open, else the global one.

    Exactly one location is used per process; the two are never merged.
    """
    if workspace is not None:
        return workspace / WORKSPACE_CONFIG_DIR / CONFIG_FILENAME
    return global_dir / CONFIG_FILENAME


class RemoteConfigRepository:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> RemoteConfig | None:
        if not self._path.exists():
            return None
        try:
            payload: Any = json.loads(self._path.read_text(encoding="utf-8"))
            return RemoteConfig.model_validate(payload)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise ConfigError(f"invalid sync config file: {self._path}") from exc

    def save(self, config: RemoteConfig) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(config.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to persist sync config: {self._path}") from exc
        _LOG.debug("Saved sync config to %s", self._path)

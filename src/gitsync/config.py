"""Tool configuration loading."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gitsync.contracts.config import GitSyncSettings
from gitsync.contracts.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("~/.cursor-global/gitsync.json")
CLIENT_ID_ENV = "GITSYNC_CLIENT_ID"


def load_settings(path: str | Path | None = None, *, workspace: str | Path | None = None) -> GitSyncSettings:
    """Load settings from JSON, falling back to defaults when no file exists.

    An explicit *path* must exist. ``GITSYNC_CLIENT_ID`` overrides
    ``client_id`` and *workspace* overrides ``workspace``.
    """
    explicit = path is not None
    config_path = Path(path if path is not None else DEFAULT_CONFIG_PATH).expanduser()

    raw_payload: Any = {}
    if explicit or config_path.exists():
        try:
            raw_payload = json.loads(config_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"failed reading config file: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
        if not isinstance(raw_payload, dict):
            raise ConfigError(f"config file must contain a JSON object: {config_path}")

    overrides: dict[str, Any] = {}
    client_id = (os.getenv(CLIENT_ID_ENV) or "").strip()
    if client_id:
        overrides["client_id"] = client_id
    if workspace is not None:
        overrides["workspace"] = str(workspace)

    try:
        return GitSyncSettings.model_validate({**raw_payload, **overrides})
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

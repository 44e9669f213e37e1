"""Extension-removal preference persistence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gitsync.contracts.config import ExtensionRemovalPreference
from gitsync.contracts.exceptions import ConfigError

PREFERENCES_FILENAME = "gitsync-preferences.json"


class PreferenceStore:
    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def in_dir(cls, global_dir: Path) -> PreferenceStore:
        return cls(global_dir / PREFERENCES_FILENAME)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ExtensionRemovalPreference:
        if not self._path.exists():
            return ExtensionRemovalPreference()
        try:
            payload: Any = json.loads(self._path.read_text(encoding="utf-8"))
            return ExtensionRemovalPreference.model_validate(payload)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise ConfigError(f"invalid preferences file: {self._path}") from exc

    def save(self, preference: ExtensionRemovalPreference) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(preference.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to persist preferences: {self._path}") from exc

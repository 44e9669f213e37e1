from __future__ import annotations

import json
from pathlib import Path

import pytest

from gitsync.config import load_settings
from gitsync.contracts.exceptions import ConfigError


def test_explicit_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "gitsync.json"
    path.write_text(json.dumps({"editor_command": "code", "user_dir": str(tmp_path / "User")}), encoding="utf-8")

    settings = load_settings(path)

    assert settings.editor_command == "code"
    assert settings.settings_path == tmp_path / "User" / "settings.json"


def test_missing_explicit_file_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading"):
        load_settings(tmp_path / "absent.json")


def test_default_path_absent_gives_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = load_settings()

    assert settings.editor_command == "cursor"
    assert settings.global_dir == tmp_path / ".cursor-global"


def test_env_client_id_and_workspace_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "gitsync.json"
    path.write_text(json.dumps({"client_id": "from-file"}), encoding="utf-8")
    monkeypatch.setenv("GITSYNC_CLIENT_ID", "from-env")

    settings = load_settings(path, workspace=tmp_path / "ws")

    assert settings.client_id == "from-env"
    assert settings.workspace == tmp_path / "ws"


@pytest.mark.parametrize("content", ["{bad", "[]", '{"device_flow_max_attempts": 0}'])
def test_invalid_config_is_config_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "gitsync.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(path)

"""Shared test fixtures for gitsync tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitsync.contracts.config import GitSyncSettings

VALID_TOKEN = "ghp_" + "a" * 36


@pytest.fixture
def valid_token() -> str:
    """A token that passes the local format check."""
    return VALID_TOKEN


@pytest.fixture
def settings(tmp_path: Path) -> GitSyncSettings:
    """Settings rooted entirely under a temporary directory."""
    return GitSyncSettings(
        user_dir=tmp_path / "user",
        global_dir=tmp_path / "global",
        workspace=tmp_path / "workspace",
        client_id="Iv1.testclient",
        device_flow_max_attempts=3,
    )


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITSYNC_CLIENT_ID", raising=False)

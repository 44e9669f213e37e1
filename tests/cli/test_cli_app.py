from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

import pytest

import gitsync.cli as cli
from gitsync import (
    AuthenticationError,
    ConfigError,
    HostError,
    SnapshotNotFoundError,
    SyncError,
    SyncReport,
    UserCancelledError,
)
from gitsync.cli import main
from gitsync.cli.common import format_apply_summary, format_report
from gitsync.contracts.sync import ApplyResult, ReconcileResult
from tests.fakes.host import FakeEditorHost
from tests.fakes.prompter import FakePrompter


def _report(*, success: bool = True, cancelled: bool = False) -> SyncReport:
    return SyncReport(operation="export", location="local", success=success, cancelled=cancelled, message="m")


def _stub_command(monkeypatch: pytest.MonkeyPatch, name: str, outcome: Any) -> None:
    async def _run(args: argparse.Namespace) -> SyncReport:
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    monkeypatch.setattr(cli, name, _run)


@pytest.mark.parametrize(
    ("command", "runner"),
    [("setup", "_run_setup"), ("export", "_run_export"), ("import", "_run_import"), ("sync", "_run_sync")],
)
def test_successful_report_exits_zero(monkeypatch: pytest.MonkeyPatch, command: str, runner: str) -> None:
    _stub_command(monkeypatch, runner, _report())

    assert main([command]) == 0


def test_failed_report_exits_five(monkeypatch: pytest.MonkeyPatch) -> None:
    _stub_command(monkeypatch, "_run_export", _report(success=False))

    assert main(["export"]) == 5


def test_cancelled_report_exits_two(monkeypatch: pytest.MonkeyPatch) -> None:
    _stub_command(monkeypatch, "_run_setup", _report(success=False, cancelled=True))

    assert main(["setup"]) == 2


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigError("bad config"), 3),
        (AuthenticationError("bad token"), 4),
        (UserCancelledError("cancelled"), 4),
        (SnapshotNotFoundError("run export first"), 5),
        (HostError("cursor missing"), 5),
        (SyncError("boom"), 5),
    ],
)
def test_errors_map_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], error: Exception, code: int
) -> None:
    _stub_command(monkeypatch, "_run_import", error)

    assert main(["import"]) == code
    assert f"error: {error}" in capsys.readouterr().err


def test_verbose_configures_debug_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    _stub_command(monkeypatch, "_run_sync", _report())

    assert main(["sync", "--verbose"]) == 0
    assert calls and calls[0]["level"] == logging.DEBUG


def test_prefs_command_updates_and_prints(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    config = tmp_path / "gitsync.json"
    config.write_text(json.dumps({"global_dir": str(tmp_path / "global")}), encoding="utf-8")
    monkeypatch.setattr(cli, "QuestionaryPrompter", FakePrompter)

    assert main(["prefs", "--config", str(config), "--never-remove", "on"]) == 0

    saved = json.loads((tmp_path / "global" / "gitsync-preferences.json").read_text(encoding="utf-8"))
    assert saved == {"alwaysAllow": False, "neverRemove": True}
    assert "Never remove:  on" in capsys.readouterr().out


def test_prefs_command_missing_config_exits_three(tmp_path: Path) -> None:
    assert main(["prefs", "--config", str(tmp_path / "absent.json")]) == 3


def test_export_command_runs_against_local_store(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    config = tmp_path / "gitsync.json"
    config.write_text(
        json.dumps({"global_dir": str(tmp_path / "global"), "user_dir": str(tmp_path / "user")}), encoding="utf-8"
    )
    prompter = FakePrompter()
    host = FakeEditorHost(settings={"editor.fontSize": 11})
    original = cli.GitSync.from_settings

    def _from_settings(settings: Any, **kwargs: Any) -> Any:
        return original(settings, **{**kwargs, "host": host})

    monkeypatch.setattr(cli, "QuestionaryPrompter", lambda: prompter)
    monkeypatch.setattr(cli.GitSync, "from_settings", _from_settings)

    assert main(["export", "--config", str(config)]) == 0

    assert (tmp_path / "global" / "cursor-settings.json").exists()
    assert prompter.messages()[-1].startswith("Settings exported locally to")
    assert "gitsync - export ok (local)" in capsys.readouterr().out


@pytest.mark.parametrize("command", ["setup", "export", "import", "sync"])
def test_keyboard_interrupt_exits_two(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], command: str
) -> None:
    runner = "_run_" + command
    _stub_command(monkeypatch, runner, KeyboardInterrupt())

    assert main([command]) == 2
    assert "cancelled" in capsys.readouterr().err


def test_setup_user_cancellation_exits_two(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config = tmp_path / "gitsync.json"
    config.write_text(json.dumps({"global_dir": str(tmp_path / "global")}), encoding="utf-8")
    prompter = FakePrompter(token=None)
    monkeypatch.setattr(cli, "QuestionaryPrompter", lambda: prompter)

    assert main(["setup", "--config", str(config)]) == 2
    assert prompter.notices[-1][1] == "GitHub sync setup cancelled"


def test_setup_blank_token_exits_two(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config = tmp_path / "gitsync.json"
    config.write_text(json.dumps({"global_dir": str(tmp_path / "global")}), encoding="utf-8")
    prompter = FakePrompter()
    monkeypatch.setattr(cli, "QuestionaryPrompter", lambda: prompter)

    assert main(["setup", "--config", str(config), "--token", ""]) == 2
    assert prompter.notices[-1][1] == "GitHub sync setup cancelled"
    assert not (tmp_path / "global" / "cursor-sync-config.json").exists()


def test_format_apply_summary_lists_failures() -> None:
    result = ApplyResult(
        applied=["editor.fontSize"],
        skipped=["unknownTool.secret"],
        failed=["editor.bogus"],
        extensions=ReconcileResult(installed=2, removed=0, install_failures=["bad.ext"]),
    )

    summary = format_apply_summary(result)

    assert "1 applied, 1 skipped, 1 failed" in summary
    assert "Failed keys: editor.bogus" in summary
    assert "2 installed, 0 removed" in summary
    assert "Ext failed:  bad.ext" in summary


def test_format_report_marks_cancellation() -> None:
    assert "setup cancelled" in format_report(
        SyncReport(operation="setup", location="remote", success=False, cancelled=True, message="m")
    )

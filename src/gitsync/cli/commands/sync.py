"""Sync command: export followed by import."""

from __future__ import annotations

import argparse

from gitsync.cli.common import format_report, make_progress
from gitsync.contracts.sync import SyncReport
from gitsync.sync.orchestrator import notify_report


async def run_sync(args: argparse.Namespace) -> SyncReport:
    import gitsync.cli as cli

    settings = cli.load_settings(args.config, workspace=args.workspace)
    prompter = cli.QuestionaryPrompter()
    app = cli.GitSync.from_settings(settings, prompter=prompter, progress=make_progress(args))

    report = await app.sync_settings()
    await notify_report(prompter, report)
    print(format_report(report))
    return report


__all__ = ["run_sync"]

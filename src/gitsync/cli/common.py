"""Shared CLI formatting and wiring helpers."""

from __future__ import annotations

import argparse

from gitsync.contracts.sync import ApplyResult, SyncReport
from gitsync.engine.progress import SyncProgress


def format_comma_or_none(values: list[str]) -> str:
    if not values:
        return "none"
    return ", ".join(values)


def format_apply_summary(result: ApplyResult) -> str:
    lines = [
        f"  Settings:    {len(result.applied)} applied, {len(result.skipped)} skipped, {len(result.failed)} failed",
    ]
    if result.failed:
        lines.append(f"  Failed keys: {format_comma_or_none(result.failed)}")
    extensions = result.extensions
    lines.append(f"  Extensions:  {extensions.installed} installed, {extensions.removed} removed")
    failures = [*extensions.install_failures, *extensions.removal_failures]
    if failures:
        lines.append(f"  Ext failed:  {format_comma_or_none(failures)}")
    return "\n".join(lines)


def format_report(report: SyncReport) -> str:
    status = "ok" if report.success else "cancelled" if report.cancelled else "failed"
    lines = ["", f"gitsync - {report.operation} {status} ({report.location})", ""]
    if report.apply is not None:
        lines.append(format_apply_summary(report.apply))
        lines.append("")
    return "\n".join(lines)


def make_progress(args: argparse.Namespace) -> SyncProgress | None:
    if args.verbose:
        return None
    from gitsync.cli.progress.rich import RichSyncProgress

    return RichSyncProgress()


__all__ = ["format_apply_summary", "format_comma_or_none", "format_report", "make_progress"]

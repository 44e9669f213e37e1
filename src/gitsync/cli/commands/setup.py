"""Setup command: authenticate and bind a settings gist."""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
from collections.abc import Iterator
from contextlib import contextmanager

from gitsync.cli.common import make_progress
from gitsync.contracts.exceptions import UserCancelledError
from gitsync.contracts.host import AuthMethod
from gitsync.contracts.sync import SyncReport
from gitsync.sync.orchestrator import REMOTE, notify_report

_LOG = logging.getLogger(__name__)


@contextmanager
def cancel_on_interrupt(event: asyncio.Event | None) -> Iterator[None]:
    """Route Ctrl+C to *event* while the block runs.

    Falls back to the default KeyboardInterrupt behaviour where the loop
    cannot install signal handlers (Windows, non-main threads).
    """
    if event is None:
        yield
        return
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, event.set)
    except (NotImplementedError, RuntimeError):
        _LOG.debug("SIGINT handler not supported on this platform")
        yield
        return
    try:
        yield
    finally:
        loop.remove_signal_handler(signal.SIGINT)


async def run_setup(args: argparse.Namespace) -> SyncReport:
    import gitsync.cli as cli

    settings = cli.load_settings(args.config, workspace=args.workspace)
    prompter = cli.QuestionaryPrompter()
    app = cli.GitSync.from_settings(settings, prompter=prompter, progress=make_progress(args))

    method = AuthMethod(args.method)
    cancel_event = asyncio.Event() if method is AuthMethod.DEVICE else None
    resolver = app.token_resolver(method, token=args.token, cancel_event=cancel_event)

    try:
        with cancel_on_interrupt(cancel_event):
            report = await app.setup(resolver)
    except UserCancelledError as exc:
        _LOG.debug("Setup cancelled: %s", exc)
        report = SyncReport(
            operation="setup",
            location=REMOTE,
            success=False,
            cancelled=True,
            message="GitHub sync setup cancelled",
        )

    await notify_report(prompter, report)
    return report


__all__ = ["cancel_on_interrupt", "run_setup"]

"""Sync orchestration exports."""

from gitsync.sync.orchestrator import LOCAL, REMOTE, SyncOrchestrator, notify_report

__all__ = ["LOCAL", "REMOTE", "SyncOrchestrator", "notify_report"]

"""Snapshot assembly and application."""

from gitsync.snapshot.allowlist import ALLOWED_NAMESPACES, flatten_settings, is_allowed_key, partition_settings
from gitsync.snapshot.service import SnapshotService

__all__ = ["ALLOWED_NAMESPACES", "SnapshotService", "flatten_settings", "is_allowed_key", "partition_settings"]

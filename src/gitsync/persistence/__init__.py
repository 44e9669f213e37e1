"""Persistence helpers for snapshots, sync config and preferences."""

from gitsync.persistence.local_store import LocalStore
from gitsync.persistence.preferences import PreferenceStore
from gitsync.persistence.remote_config import RemoteConfigRepository, remote_config_path

__all__ = ["LocalStore", "PreferenceStore", "RemoteConfigRepository", "remote_config_path"]

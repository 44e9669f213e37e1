"""Engine module exports."""

from gitsync.engine.progress import NullSyncProgress, SyncProgress
from gitsync.engine.reconciler import ExtensionReconciler, plan_extensions

__all__ = ["ExtensionReconciler", "NullSyncProgress", "SyncProgress", "plan_extensions"]

"""Public API surface for gitsync."""

__version__ = "0.1.0"

from gitsync.auth import AuthSession, TokenResolver, create_token_resolver
from gitsync.config import load_settings
from gitsync.contracts import (
    ApplyResult,
    AuthenticationError,
    AuthorizationDeniedError,
    AuthorizationExpiredError,
    AuthorizationTimeoutError,
    AuthTransportError,
    ConfigError,
    ConfigSnapshot,
    EditorHost,
    ExtensionRemovalPreference,
    GistDescriptor,
    GitSyncError,
    GitSyncSettings,
    HostError,
    InvalidTokenFormatError,
    ReconcileResult,
    RemoteConfig,
    RemoteRejectedError,
    RemoteStore,
    RemovalChoice,
    RemovalDecision,
    SnapshotNotFoundError,
    StoreError,
    SyncError,
    SyncPrompter,
    SyncReport,
    UserCancelledError,
)
from gitsync.engine import ExtensionReconciler, SyncProgress, plan_extensions
from gitsync.sdk import GitSync
from gitsync.sync import SyncOrchestrator

__all__ = [
    "ApplyResult",
    "AuthSession",
    "AuthTransportError",
    "AuthenticationError",
    "AuthorizationDeniedError",
    "AuthorizationExpiredError",
    "AuthorizationTimeoutError",
    "ConfigError",
    "ConfigSnapshot",
    "EditorHost",
    "ExtensionReconciler",
    "ExtensionRemovalPreference",
    "GistDescriptor",
    "GitSync",
    "GitSyncError",
    "GitSyncSettings",
    "HostError",
    "InvalidTokenFormatError",
    "ReconcileResult",
    "RemoteConfig",
    "RemoteRejectedError",
    "RemoteStore",
    "RemovalChoice",
    "RemovalDecision",
    "SnapshotNotFoundError",
    "StoreError",
    "SyncError",
    "SyncOrchestrator",
    "SyncProgress",
    "SyncPrompter",
    "SyncReport",
    "TokenResolver",
    "UserCancelledError",
    "__version__",
    "create_token_resolver",
    "load_settings",
    "plan_extensions",
]

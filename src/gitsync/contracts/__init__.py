"""Public contracts for gitsync."""

from gitsync.contracts.config import ExtensionRemovalPreference, GitSyncSettings, RemoteConfig
from gitsync.contracts.exceptions import (
    AuthenticationError,
    AuthorizationDeniedError,
    AuthorizationExpiredError,
    AuthorizationTimeoutError,
    AuthTransportError,
    ConfigError,
    GitSyncError,
    HostError,
    InvalidTokenFormatError,
    RemoteRejectedError,
    SnapshotNotFoundError,
    StoreError,
    StoreTransportError,
    SyncError,
    UserCancelledError,
)
from gitsync.contracts.host import (
    CREATE_NEW,
    AuthMethod,
    CreateNewDocument,
    EditorHost,
    NoticeLevel,
    RemovalChoice,
    SyncPrompter,
)
from gitsync.contracts.remote import GistDescriptor, RemoteStore
from gitsync.contracts.snapshot import ConfigSnapshot, empty_snapshot
from gitsync.contracts.sync import (
    ApplyResult,
    ExtensionPlan,
    PersistResult,
    ReconcileResult,
    RemovalDecision,
    SyncReport,
)

__all__ = [
    "CREATE_NEW",
    "ApplyResult",
    "AuthMethod",
    "AuthTransportError",
    "AuthenticationError",
    "AuthorizationDeniedError",
    "AuthorizationExpiredError",
    "AuthorizationTimeoutError",
    "ConfigError",
    "ConfigSnapshot",
    "CreateNewDocument",
    "EditorHost",
    "ExtensionPlan",
    "ExtensionRemovalPreference",
    "GistDescriptor",
    "GitSyncError",
    "GitSyncSettings",
    "HostError",
    "InvalidTokenFormatError",
    "NoticeLevel",
    "PersistResult",
    "ReconcileResult",
    "RemoteConfig",
    "RemoteRejectedError",
    "RemoteStore",
    "RemovalChoice",
    "RemovalDecision",
    "SnapshotNotFoundError",
    "StoreError",
    "StoreTransportError",
    "SyncError",
    "SyncPrompter",
    "SyncReport",
    "UserCancelledError",
    "empty_snapshot",
]

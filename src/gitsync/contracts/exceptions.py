"""Exception hierarchy for gitsync.

All gitsync exceptions inherit from :class:`GitSyncError`, making it easy to
catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations


class GitSyncError(Exception):
    """Base exception for all gitsync errors."""


class ConfigError(GitSyncError):
    """Configuration loading or validation failure."""


class AuthenticationError(GitSyncError):
    """Authentication failure. Terminal for the current attempt."""


class UserCancelledError(AuthenticationError):
    """The user dismissed a prompt or cancelled the device-flow poll."""


class InvalidTokenFormatError(AuthenticationError):
    """A directly supplied token does not look like a GitHub token."""


class RemoteRejectedError(AuthenticationError):
    """GitHub rejected the credential or the authorization request."""


class AuthorizationDeniedError(AuthenticationError):
    """The user denied the device authorization request."""


class AuthorizationExpiredError(AuthenticationError):
    """The device code expired before the user authorized it."""


class AuthorizationTimeoutError(AuthenticationError):
    """The device-flow poll reached its attempt cap."""


class AuthTransportError(AuthenticationError):
    """A network failure prevented authentication."""


class StoreError(GitSyncError):
    """Snapshot store failure."""


class SnapshotNotFoundError(StoreError):
    """No local snapshot exists to import."""


class StoreTransportError(StoreError):
    """A network failure prevented a remote store operation."""


class HostError(GitSyncError):
    """The editor host could not perform an operation."""

    def __init__(self, message: str, *, subject: str | None = None) -> None:
        super().__init__(message)
        self.subject = subject


class SyncError(GitSyncError):
    """Orchestration-level synchronization failure."""

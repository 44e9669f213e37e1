"""Setup, export, import and sync built on the stores and the snapshot service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from pydantic import ValidationError

from gitsync.auth.base import TokenResolver
from gitsync.auth.session import AuthSession
from gitsync.contracts.exceptions import AuthenticationError, SnapshotNotFoundError
from gitsync.contracts.host import NoticeLevel, SyncPrompter
from gitsync.contracts.remote import GistDescriptor, RemoteStore
from gitsync.contracts.snapshot import ConfigSnapshot, empty_snapshot
from gitsync.contracts.sync import ApplyResult, PersistResult, SyncReport
from gitsync.engine.progress import NullSyncProgress, SyncPhase, SyncProgress
from gitsync.persistence.local_store import LocalStore
from gitsync.remote.discovery import DEFAULT_DESCRIPTION
from gitsync.remote.gist import GistStore
from gitsync.snapshot.service import SnapshotService

_LOG = logging.getLogger(__name__)

REMOTE = "remote"
LOCAL = "local"

StoreFactory = Callable[[AuthSession], RemoteStore]


def _gist_store_factory(session: AuthSession) -> RemoteStore:
    return GistStore(token=session.token, client_factory=session.client_factory)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SyncOrchestrator:
    """Runs one user-triggered operation against the remote gist or the local fallback.

    The remote is used whenever the session holds both a token and a bound
    gist. There is no locking: the gist is a last-writer-wins document and
    two machines syncing at once may overwrite each other.
    """

    def __init__(
        self,
        *,
        session: AuthSession,
        snapshots: SnapshotService,
        local_store: LocalStore,
        prompter: SyncPrompter,
        store_factory: StoreFactory | None = None,
        progress: SyncProgress | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._session = session
        self._snapshots = snapshots
        self._local = local_store
        self._prompter = prompter
        self._store_factory = store_factory or _gist_store_factory
        self._progress = progress or NullSyncProgress()
        self._clock = clock or _utcnow

    @property
    def uses_remote(self) -> bool:
        return self._session.is_configured

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    async def setup(self, resolver: TokenResolver) -> SyncReport:
        self._progress.phase_start("Auth")
        try:
            login = await self._session.authenticate(resolver)
        except AuthenticationError as exc:
            self._progress.phase_error("Auth", exc)
            raise
        self._progress.phase_done("Auth")
        await self._prompter.notify(f"Successfully authenticated as {login}")
        return await self._select_or_create_document()

    async def _select_or_create_document(self) -> SyncReport:
        store = self._store_factory(self._session)

        self._progress.phase_start("Discover")
        candidates = await store.list_candidate_documents()
        if candidates is None:
            self._progress.phase_error("Discover", RuntimeError("listing gists failed"))
            return self._report(
                "setup", REMOTE, False, "Failed to fetch gists. Please check your token permissions."
            )
        self._progress.phase_done("Discover")

        if candidates:
            choice = await self._prompter.pick_document(candidates)
            if choice is None:
                return self._cancelled("setup")
            if isinstance(choice, GistDescriptor):
                self._session.bind_document(choice.id, choice.description)
                return self._report(
                    "setup", REMOTE, True, f"GitHub sync setup completed successfully (gist: {choice.description})"
                )
        return await self._create_document(store)

    async def _create_document(self, store: RemoteStore) -> SyncReport:
        description = await self._prompter.ask_description(DEFAULT_DESCRIPTION)
        if not description:
            return self._cancelled("setup")

        gist_id = await store.create_document(empty_snapshot(self._clock()).to_json(), description)
        if gist_id is None:
            return self._report(
                "setup", REMOTE, False, "Failed to create new gist. Please check your token permissions."
            )
        self._session.bind_document(gist_id, description)
        return self._report("setup", REMOTE, True, f"GitHub sync setup completed successfully (gist: {description})")

    # ------------------------------------------------------------------
    # Export / import / sync
    # ------------------------------------------------------------------

    async def export_settings(self) -> SyncReport:
        snapshot = (await self._snapshots.capture()).stamped(self._clock())
        result = await self._persist(snapshot)
        return self._export_report("export", result)

    async def import_settings(self) -> SyncReport:
        location, snapshot = await self._fetch()
        if snapshot is None:
            return self._report("import", location, False, "Failed to download settings from GitHub Gist")
        applied = await self._snapshots.apply(snapshot)
        if location == REMOTE:
            return self._report("import", location, True, "Settings imported from GitHub Gist successfully", applied)
        return self._report(
            "import",
            location,
            True,
            "Settings imported locally. Run `gitsync setup` for cloud sync.",
            applied,
        )

    async def sync_settings(self) -> SyncReport:
        """Upload the current state, then download and apply what the remote holds.

        Without a remote this is an export followed by an import of the local
        snapshot. A change written to the gist by another machine between the
        upload and the download is applied here as-is.
        """
        snapshot = (await self._snapshots.capture()).stamped(self._clock())
        persisted = await self._persist(snapshot)
        if not persisted.ok:
            return self._export_report("sync", persisted)

        location, latest = await self._fetch()
        if latest is None:
            return self._report("sync", location, False, "Settings uploaded, but downloading them back failed")
        applied = await self._snapshots.apply(latest)
        if location == REMOTE:
            return self._report("sync", location, True, "Settings synced with GitHub Gist successfully", applied)
        return self._report(
            "sync", location, True, "Settings synced locally. Run `gitsync setup` for cloud sync.", applied
        )

    async def _persist(self, snapshot: ConfigSnapshot) -> PersistResult:
        if not self.uses_remote:
            self._progress.phase_start("Save")
            result = self._local.write_snapshot(snapshot)
            self._finish_phase("Save", result.ok)
            return result

        config = self._session.config
        assert config is not None
        self._progress.phase_start("Upload")
        store = self._store_factory(self._session)
        uploaded = await store.update_document(config.gist_id, snapshot.to_json(), config.gist_description)
        self._finish_phase("Upload", uploaded)
        if uploaded:
            return PersistResult.success(REMOTE)
        return PersistResult.failure("upload to GitHub Gist failed", location=REMOTE)

    async def _fetch(self) -> tuple[str, ConfigSnapshot | None]:
        if not self.uses_remote:
            snapshot = self._local.read_snapshot()
            if snapshot is None:
                raise SnapshotNotFoundError(f"No settings file found at {self._local.snapshot_path}; run export first")
            return LOCAL, snapshot

        config = self._session.config
        assert config is not None
        self._progress.phase_start("Download")
        payload = await self._store_factory(self._session).get_document(config.gist_id)
        if payload is None:
            self._finish_phase("Download", False)
            return REMOTE, None
        try:
            snapshot = ConfigSnapshot.model_validate(payload)
        except ValidationError as exc:
            _LOG.warning("Gist %s does not hold a valid snapshot: %s", config.gist_id, exc)
            self._finish_phase("Download", False)
            return REMOTE, None
        self._finish_phase("Download", True)
        return REMOTE, snapshot

    # ------------------------------------------------------------------
    # Reporting helpers
    # ------------------------------------------------------------------

    def _finish_phase(self, phase: SyncPhase, ok: bool) -> None:
        if ok:
            self._progress.phase_done(phase)
        else:
            self._progress.phase_error(phase, RuntimeError(f"{phase.lower()} failed"))

    def _export_report(self, operation: str, result: PersistResult) -> SyncReport:
        if not result.ok:
            location = REMOTE if result.location == REMOTE else LOCAL
            return self._report(operation, location, False, f"Failed to export settings: {result.reason}")
        if result.location == REMOTE:
            return self._report(operation, REMOTE, True, "Settings exported to GitHub Gist successfully")
        return self._report(
            operation,
            LOCAL,
            True,
            f"Settings exported locally to {result.location}. Run `gitsync setup` for cloud sync.",
        )

    @staticmethod
    def _report(
        operation: str,
        location: str,
        success: bool,
        message: str,
        applied: ApplyResult | None = None,
    ) -> SyncReport:
        if success:
            _LOG.info("%s: %s", operation, message)
        else:
            _LOG.warning("%s: %s", operation, message)
        return SyncReport(operation=operation, location=location, success=success, message=message, apply=applied)

    @staticmethod
    def _cancelled(operation: str) -> SyncReport:
        return SyncReport(
            operation=operation,
            location=REMOTE,
            success=False,
            cancelled=True,
            message="GitHub sync setup cancelled",
        )


async def notify_report(prompter: SyncPrompter, report: SyncReport) -> None:
    """Send the single terminal notification for *report*."""
    if report.cancelled:
        level = NoticeLevel.WARNING
    elif report.success:
        level = NoticeLevel.INFO
    else:
        level = NoticeLevel.ERROR
    await prompter.notify(report.message, level)

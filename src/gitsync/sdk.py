"""SDK composition root for gitsync."""

from __future__ import annotations

import asyncio

from gitsync.auth import AuthSession, create_token_resolver
from gitsync.auth.base import TokenResolver
from gitsync.contracts.config import ExtensionRemovalPreference, GitSyncSettings
from gitsync.contracts.host import AuthMethod, EditorHost, SyncPrompter
from gitsync.contracts.sync import SyncReport
from gitsync.engine.progress import NullSyncProgress, SyncProgress
from gitsync.engine.reconciler import ExtensionReconciler
from gitsync.hosts.filesystem import EditorCli, FileSystemEditorHost
from gitsync.persistence.local_store import LocalStore
from gitsync.persistence.preferences import PreferenceStore
from gitsync.persistence.remote_config import RemoteConfigRepository, remote_config_path
from gitsync.remote.client import ClientFactory, default_client_factory
from gitsync.snapshot.service import SnapshotService
from gitsync.sync.orchestrator import StoreFactory, SyncOrchestrator


class GitSync:
    """gitsync SDK public API.

    One instance per process: it owns the auth session, which is loaded once
    from the workspace or global sync config.
    """

    def __init__(
        self,
        *,
        settings: GitSyncSettings,
        session: AuthSession,
        orchestrator: SyncOrchestrator,
        preferences: PreferenceStore,
        prompter: SyncPrompter,
        client_factory: ClientFactory,
    ) -> None:
        self._settings = settings
        self._session = session
        self._orchestrator = orchestrator
        self._preferences = preferences
        self._prompter = prompter
        self._client_factory = client_factory

    @classmethod
    def from_settings(
        cls,
        settings: GitSyncSettings,
        *,
        prompter: SyncPrompter,
        host: EditorHost | None = None,
        progress: SyncProgress | None = None,
        client_factory: ClientFactory | None = None,
        store_factory: StoreFactory | None = None,
    ) -> GitSync:
        progress = progress or NullSyncProgress()
        client_factory = client_factory or default_client_factory(settings.http_timeout)
        host = host or FileSystemEditorHost(
            settings_path=settings.settings_path,
            cli=EditorCli(settings.editor_command),
        )

        session = AuthSession(
            repository=RemoteConfigRepository(
                remote_config_path(global_dir=settings.global_dir, workspace=settings.workspace)
            ),
            client_factory=client_factory,
        )
        session.load()

        local_store = LocalStore(
            global_dir=settings.global_dir,
            keybindings_path=settings.keybindings_path,
            workspace=settings.workspace,
        )
        preferences = PreferenceStore.in_dir(settings.global_dir)
        reconciler = ExtensionReconciler(host=host, preferences=preferences, prompter=prompter, progress=progress)
        snapshots = SnapshotService(host=host, artifacts=local_store, reconciler=reconciler, progress=progress)
        orchestrator = SyncOrchestrator(
            session=session,
            snapshots=snapshots,
            local_store=local_store,
            prompter=prompter,
            store_factory=store_factory,
            progress=progress,
        )
        return cls(
            settings=settings,
            session=session,
            orchestrator=orchestrator,
            preferences=preferences,
            prompter=prompter,
            client_factory=client_factory,
        )

    @property
    def session(self) -> AuthSession:
        return self._session

    @property
    def is_configured(self) -> bool:
        return self._session.is_configured

    def token_resolver(
        self,
        method: AuthMethod | str,
        *,
        token: str | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> TokenResolver:
        return create_token_resolver(
            method,
            settings=self._settings,
            prompter=self._prompter,
            token=token,
            cancel_event=cancel_event,
            client_factory=self._client_factory,
        )

    async def setup(self, resolver: TokenResolver) -> SyncReport:
        return await self._orchestrator.setup(resolver)

    async def export_settings(self) -> SyncReport:
        return await self._orchestrator.export_settings()

    async def import_settings(self) -> SyncReport:
        return await self._orchestrator.import_settings()

    async def sync_settings(self) -> SyncReport:
        return await self._orchestrator.sync_settings()

    def removal_preference(self) -> ExtensionRemovalPreference:
        return self._preferences.load()

    def update_removal_preference(
        self,
        *,
        always_allow: bool | None = None,
        never_remove: bool | None = None,
        reset: bool = False,
    ) -> ExtensionRemovalPreference:
        current = ExtensionRemovalPreference() if reset else self._preferences.load()
        update: dict[str, bool] = {}
        if always_allow is not None:
            update["always_allow"] = always_allow
        if never_remove is not None:
            update["never_remove"] = never_remove
        preference = current.model_copy(update=update)
        self._preferences.save(preference)
        return preference

"""Extension-set convergence between the installed set and a snapshot."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable

from gitsync.contracts.exceptions import HostError
from gitsync.contracts.host import EditorHost, NoticeLevel, RemovalChoice, SyncPrompter
from gitsync.contracts.sync import ExtensionPlan, ReconcileResult, RemovalDecision
from gitsync.engine.progress import NullSyncProgress, SyncPhase, SyncProgress
from gitsync.persistence.preferences import PreferenceStore

_LOG = logging.getLogger(__name__)

PHASE: SyncPhase = "Extensions"


def plan_extensions(current: Iterable[str], target: Iterable[str]) -> ExtensionPlan:
    """Exact-string set difference in both directions, sorted."""
    current_set = set(current)
    target_set = set(target)
    return ExtensionPlan(
        to_install=sorted(target_set - current_set),
        to_remove=sorted(current_set - target_set),
    )


class ExtensionReconciler:
    """Installs missing extensions and, subject to the removal policy, removes extra ones.

    Each install or uninstall is independent: a failure is logged and the
    remaining ids are still processed. Reported counts are attempted counts.
    """

    def __init__(
        self,
        *,
        host: EditorHost,
        preferences: PreferenceStore,
        prompter: SyncPrompter,
        progress: SyncProgress | None = None,
    ) -> None:
        self._host = host
        self._preferences = preferences
        self._prompter = prompter
        self._progress = progress or NullSyncProgress()

    async def reconcile(self, target: Iterable[str]) -> ReconcileResult:
        current = await self._host.installed_extensions()
        plan = plan_extensions(current, target)
        _LOG.debug("Extension plan: install=%s remove=%s", plan.to_install, plan.to_remove)

        self._progress.phase_start(PHASE, total=len(plan.to_install) + len(plan.to_remove))
        install_failures = await self._run_each(plan.to_install, self._host.install_extension, verb="install")

        decision = RemovalDecision.NOT_NEEDED
        removal_failures: list[str] = []
        if plan.to_remove:
            decision = await self._decide_removal(plan.to_remove)
            if decision is RemovalDecision.APPROVED:
                removal_failures = await self._run_each(
                    plan.to_remove, self._host.uninstall_extension, verb="uninstall"
                )
        self._progress.phase_done(PHASE)

        installed = len(plan.to_install)
        removed = len(plan.to_remove) if decision is RemovalDecision.APPROVED else 0
        summary: str | None = None
        if installed or removed:
            summary = f"Extensions updated: {installed} installed, {removed} removed"
            await self._prompter.notify(summary)

        return ReconcileResult(
            to_install=plan.to_install,
            to_remove=plan.to_remove,
            decision=decision,
            installed=installed,
            removed=removed,
            install_failures=install_failures,
            removal_failures=removal_failures,
            summary=summary,
        )

    async def _run_each(
        self,
        extension_ids: list[str],
        operation: Callable[[str], Awaitable[None]],
        *,
        verb: str,
    ) -> list[str]:
        failures: list[str] = []
        for extension_id in extension_ids:
            try:
                await operation(extension_id)
                _LOG.info("%sed extension %s", verb.capitalize(), extension_id)
            except HostError as exc:
                _LOG.error("Failed to %s extension %s: %s", verb, extension_id, exc)
                failures.append(extension_id)
            self._progress.item_done(PHASE)
        return failures

    async def _decide_removal(self, candidates: list[str]) -> RemovalDecision:
        preference = self._preferences.load()

        if preference.never_remove:
            await self._prompter.notify("Extension removal is disabled. No extensions will be removed.")
            return RemovalDecision.DENIED
        if preference.always_allow:
            return RemovalDecision.APPROVED

        choice = await self._prompter.confirm_removal(candidates)
        if choice is RemovalChoice.REMOVE_ONCE:
            return RemovalDecision.APPROVED
        if choice is RemovalChoice.ALWAYS_ALLOW:
            self._preferences.save(preference.model_copy(update={"always_allow": True}))
            await self._prompter.notify(
                'Extension removal is now set to "Always Allow". Change it with `gitsync prefs`.'
            )
            return RemovalDecision.APPROVED
        if choice is RemovalChoice.NEVER_REMOVE:
            self._preferences.save(preference.model_copy(update={"never_remove": True}))
            await self._prompter.notify(
                "Extension removal is now disabled. Change it with `gitsync prefs`.", NoticeLevel.WARNING
            )
            return RemovalDecision.DENIED
        return RemovalDecision.DEFERRED

"""Result contracts for apply, reconcile and orchestration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PersistResult(BaseModel):
    ok: bool
    location: str = ""
    reason: str | None = None

    @classmethod
    def success(cls, location: str) -> PersistResult:
        return cls(ok=True, location=location)

    @classmethod
    def failure(cls, reason: str, *, location: str = "") -> PersistResult:
        return cls(ok=False, location=location, reason=reason)


class RemovalDecision(str, Enum):
    NOT_NEEDED = "not-needed"
    APPROVED = "approved"
    DENIED = "denied"
    DEFERRED = "deferred"


class ExtensionPlan(BaseModel):
    to_install: list[str] = Field(default_factory=list)
    to_remove: list[str] = Field(default_factory=list)


class ReconcileResult(BaseModel):
    """Outcome of one extension reconciliation run.

    ``installed`` and ``removed`` count attempted operations. A failed
    individual install or uninstall still counts; the failures are listed
    separately.
    """

    to_install: list[str] = Field(default_factory=list)
    to_remove: list[str] = Field(default_factory=list)
    decision: RemovalDecision = RemovalDecision.NOT_NEEDED
    installed: int = 0
    removed: int = 0
    install_failures: list[str] = Field(default_factory=list)
    removal_failures: list[str] = Field(default_factory=list)
    summary: str | None = None


class ApplyResult(BaseModel):
    applied: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    extensions: ReconcileResult = Field(default_factory=ReconcileResult)


class SyncReport(BaseModel):
    operation: str
    location: str
    success: bool
    message: str
    cancelled: bool = False
    apply: ApplyResult | None = None

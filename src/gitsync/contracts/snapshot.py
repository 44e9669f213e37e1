"""Snapshot contracts: the unit of transfer between machines."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator


class ConfigSnapshot(BaseModel):
    """Settings, keybindings, extensions and workspace state at one point in time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    settings: dict[str, JsonValue] = Field(default_factory=dict)
    keybindings: list[JsonValue] = Field(default_factory=list)
    extensions: list[str] = Field(default_factory=list)
    workspace_state: dict[str, JsonValue] | None = Field(default=None, alias="workspaceState")
    last_updated: datetime | None = Field(default=None, alias="lastUpdated")

    @field_validator("keybindings", mode="before")
    @classmethod
    def _legacy_empty_keybindings(cls, value: Any) -> Any:
        # Older exports wrote {} when no keybindings file existed.
        if isinstance(value, dict) and not value:
            return []
        return value

    @field_validator("extensions")
    @classmethod
    def _unique_extensions(cls, value: list[str]) -> list[str]:
        return sorted(set(value))

    def without_timestamp(self) -> ConfigSnapshot:
        return self.model_copy(update={"last_updated": None})

    def stamped(self, when: datetime) -> ConfigSnapshot:
        return self.model_copy(update={"last_updated": when})

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def empty_snapshot(when: datetime | None = None) -> ConfigSnapshot:
    """Snapshot written into a freshly created remote document."""
    return ConfigSnapshot(workspace_state={}, last_updated=when)

"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RemoteConfig(BaseModel):
    """Credential and remote-document binding, persisted after every change."""

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(default="", repr=False)
    gist_id: str = Field(default="", alias="gistId")
    gist_description: str = Field(default="", alias="gistDescription")

    @property
    def is_configured(self) -> bool:
        return self.token != "" and self.gist_id != ""


class ExtensionRemovalPreference(BaseModel):
    """Sticky policy for removing extensions that are absent from the target.

    ``never_remove`` takes precedence when both flags are set.
    """

    model_config = ConfigDict(populate_by_name=True)

    always_allow: bool = Field(default=False, alias="alwaysAllow")
    never_remove: bool = Field(default=False, alias="neverRemove")


class GitSyncSettings(BaseModel):
    editor_command: str = "cursor"
    user_dir: Path = Path("~/.cursor/User")
    global_dir: Path = Path("~/.cursor-global")
    workspace: Path | None = None
    client_id: str | None = None
    device_flow_max_attempts: int = Field(default=60, ge=1)
    http_timeout: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True, "validate_default": True}

    @field_validator("user_dir", "global_dir", "workspace")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        return value.expanduser()

    @property
    def settings_path(self) -> Path:
        return self.user_dir / "settings.json"

    @property
    def keybindings_path(self) -> Path:
        return self.user_dir / "keybindings.json"

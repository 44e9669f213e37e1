"""Collaborator contracts: the editor host and the user interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import JsonValue

from gitsync.contracts.remote import GistDescriptor


class EditorHost(ABC):
    """Access to the editor's user settings and extension manager.

    Failing operations raise :class:`~gitsync.contracts.exceptions.HostError`.
    """

    @abstractmethod
    async def read_settings(self) -> dict[str, JsonValue]:
        """Return user settings flattened to dotted keys."""
        ...  # pragma: no cover

    @abstractmethod
    async def update_setting(self, key: str, value: JsonValue) -> None: ...  # pragma: no cover

    @abstractmethod
    async def installed_extensions(self) -> set[str]:
        """Return identifiers of installed extensions, excluding built-ins."""
        ...  # pragma: no cover

    @abstractmethod
    async def install_extension(self, extension_id: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def uninstall_extension(self, extension_id: str) -> None: ...  # pragma: no cover


class NoticeLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class RemovalChoice(str, Enum):
    REMOVE_ONCE = "remove-once"
    ALWAYS_ALLOW = "always-allow"
    NEVER_REMOVE = "never-remove"
    SKIP_ONCE = "skip-once"


class AuthMethod(str, Enum):
    TOKEN = "token"
    ENV = "env"
    DEVICE = "device"


class CreateNewDocument:
    """Marker returned by :meth:`SyncPrompter.pick_document` to request a new gist."""

    def __repr__(self) -> str:
        return "CREATE_NEW"


CREATE_NEW = CreateNewDocument()


class SyncPrompter(ABC):
    """Interactive surface. ``None`` results mean the user dismissed the prompt."""

    @abstractmethod
    async def ask_token(self) -> str | None: ...  # pragma: no cover

    @abstractmethod
    async def show_device_code(self, user_code: str, verification_uri: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def pick_document(
        self, candidates: list[GistDescriptor]
    ) -> GistDescriptor | CreateNewDocument | None: ...  # pragma: no cover

    @abstractmethod
    async def ask_description(self, default: str) -> str | None: ...  # pragma: no cover

    @abstractmethod
    async def confirm_removal(self, extension_ids: list[str]) -> RemovalChoice | None: ...  # pragma: no cover

    @abstractmethod
    async def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None: ...  # pragma: no cover

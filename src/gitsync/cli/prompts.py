"""Terminal prompts backed by questionary and rich."""

from __future__ import annotations

from typing import ClassVar

import questionary
from rich.console import Console
from rich.panel import Panel

from gitsync.auth.base import is_token_format_valid
from gitsync.contracts.host import CREATE_NEW, CreateNewDocument, NoticeLevel, RemovalChoice, SyncPrompter
from gitsync.contracts.remote import GistDescriptor

TOKEN_URL = "https://github.com/settings/tokens/new?scopes=gist&description=Git%20Sync"


def _validate_token(value: str) -> bool | str:
    if is_token_format_valid(value.strip()):
        return True
    return "Enter a GitHub token (starts with ghp_, gho_, ghu_ or github_pat_)"


def _describe(descriptor: GistDescriptor) -> str:
    label = descriptor.description or f"Gist {descriptor.id}"
    if descriptor.updated_at is None:
        return label
    return f"{label}  (updated {descriptor.updated_at.date().isoformat()})"


class QuestionaryPrompter(SyncPrompter):
    _STYLES: ClassVar[dict[NoticeLevel, str]] = {
        NoticeLevel.INFO: "green",
        NoticeLevel.WARNING: "yellow",
        NoticeLevel.ERROR: "bold red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    async def ask_token(self) -> str | None:
        self._console.print(
            "Git Sync needs a GitHub personal access token with the [bold]gist[/] scope.\n"
            f"Create one at {TOKEN_URL}"
        )
        token = await questionary.password("GitHub personal access token:", validate=_validate_token).ask_async()
        if not token:
            return None
        return token.strip()

    async def show_device_code(self, user_code: str, verification_uri: str) -> None:
        self._console.print(
            Panel.fit(
                f"Open [link={verification_uri}]{verification_uri}[/link] and enter the code\n\n"
                f"    [bold cyan]{user_code}[/]\n\n"
                "Waiting for authorization (Ctrl+C to cancel)...",
                title="GitHub device authorization",
            )
        )

    async def pick_document(self, candidates: list[GistDescriptor]) -> GistDescriptor | CreateNewDocument | None:
        choices = [questionary.Choice(_describe(candidate), value=candidate) for candidate in candidates]
        choices.append(questionary.Choice("Create a new gist", value=CREATE_NEW))
        return await questionary.select(
            "Select an existing gist or create a new one:",
            choices=choices,
        ).ask_async()

    async def ask_description(self, default: str) -> str | None:
        description = await questionary.text("Description for the settings gist:", default=default).ask_async()
        if description is None:
            return None
        return description.strip() or None

    async def confirm_removal(self, extension_ids: list[str]) -> RemovalChoice | None:
        listing = "\n".join(f"  {index}. {extension_id}" for index, extension_id in enumerate(extension_ids, 1))
        self._console.print(
            f"The following {len(extension_ids)} extensions will be removed:\n\n{listing}\n",
            style="yellow",
        )
        return await questionary.select(
            "Do you want to proceed?",
            choices=[
                questionary.Choice("Remove extensions", value=RemovalChoice.REMOVE_ONCE),
                questionary.Choice("Always allow", value=RemovalChoice.ALWAYS_ALLOW),
                questionary.Choice("Never remove", value=RemovalChoice.NEVER_REMOVE),
                questionary.Choice("Skip this time", value=RemovalChoice.SKIP_ONCE),
            ],
            default=RemovalChoice.SKIP_ONCE,
        ).ask_async()

    async def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self._console.print(message, style=self._STYLES[level], markup=False, highlight=False)

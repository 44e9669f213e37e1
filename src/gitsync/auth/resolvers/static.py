"""Directly supplied token resolvers."""

from __future__ import annotations

from dataclasses import dataclass

from gitsync.auth.base import TokenResolver, check_token_format
from gitsync.contracts.exceptions import UserCancelledError
from gitsync.contracts.host import SyncPrompter


def _entered_token(token: str | None) -> str:
    """A missing or blank entry means the user backed out of token entry."""
    if token is None or not token.strip():
        raise UserCancelledError("Token entry cancelled")
    return check_token_format(token)


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str

    async def resolve(self) -> str:
        return _entered_token(self.token)


@dataclass(frozen=True)
class PromptTokenResolver(TokenResolver):
    """Asks the user to paste a personal access token."""

    prompter: SyncPrompter

    async def resolve(self) -> str:
        return _entered_token(await self.prompter.ask_token())

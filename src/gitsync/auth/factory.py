"""Token resolver factory."""

from __future__ import annotations

import asyncio

from gitsync.auth.base import TokenResolver
from gitsync.auth.resolvers.device_flow import DeviceFlowTokenResolver
from gitsync.auth.resolvers.env import EnvTokenResolver
from gitsync.auth.resolvers.static import PromptTokenResolver, StaticTokenResolver
from gitsync.contracts.config import GitSyncSettings
from gitsync.contracts.exceptions import ConfigError
from gitsync.contracts.host import AuthMethod, SyncPrompter
from gitsync.remote.client import ClientFactory


def create_token_resolver(
    method: AuthMethod | str,
    *,
    settings: GitSyncSettings,
    prompter: SyncPrompter,
    token: str | None = None,
    cancel_event: asyncio.Event | None = None,
    client_factory: ClientFactory | None = None,
) -> TokenResolver:
    try:
        auth_method = AuthMethod(method)
    except ValueError as exc:
        raise ConfigError(f"Unknown auth method: {method}") from exc

    if auth_method is AuthMethod.TOKEN:
        if token is not None:
            return StaticTokenResolver(token=token)
        return PromptTokenResolver(prompter=prompter)
    if auth_method is AuthMethod.ENV:
        return EnvTokenResolver()

    if not settings.client_id:
        raise ConfigError("Device authorization requires client_id (or GITSYNC_CLIENT_ID)")
    return DeviceFlowTokenResolver(
        client_id=settings.client_id,
        on_code=prompter.show_device_code,
        cancel_event=cancel_event,
        max_attempts=settings.device_flow_max_attempts,
        client_factory=client_factory,
    )

"""OAuth device-authorization flow resolver."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import BaseModel

from gitsync.auth.base import TokenResolver
from gitsync.contracts.exceptions import (
    AuthenticationError,
    AuthorizationDeniedError,
    AuthorizationExpiredError,
    AuthorizationTimeoutError,
    AuthTransportError,
    RemoteRejectedError,
    UserCancelledError,
)
from gitsync.remote.client import GITHUB_LOGIN_URL, ClientFactory, default_client_factory

_LOG = logging.getLogger(__name__)

DEVICE_CODE_URL = f"{GITHUB_LOGIN_URL}/device/code"
ACCESS_TOKEN_URL = f"{GITHUB_LOGIN_URL}/oauth/access_token"
DEVICE_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"

DEFAULT_MAX_ATTEMPTS = 60
DEFAULT_INTERVAL = 5
SLOW_DOWN_INCREMENT = 5

CodeCallback = Callable[[str, str], Awaitable[None]]


class DeviceCode(BaseModel):
    device_code: str
    user_code: str
    verification_uri: str
    interval: int = DEFAULT_INTERVAL
    expires_in: int | None = None


def _payload(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


class DeviceFlowTokenResolver(TokenResolver):
    """Exchanges a device code for an access token by polling.

    The poll never runs faster than the provider's interval and stops on the
    first terminal answer, on cancellation, or after ``max_attempts`` polls.
    A transport error during a poll counts as an attempt and polling goes on.
    """

    def __init__(
        self,
        *,
        client_id: str,
        on_code: CodeCallback,
        cancel_event: asyncio.Event | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        scope: str = "gist",
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._client_id = client_id
        self._on_code = on_code
        self._cancel_event = cancel_event or asyncio.Event()
        self._max_attempts = max_attempts
        self._scope = scope
        self._client_factory = client_factory or default_client_factory()

    @property
    def cancel_event(self) -> asyncio.Event:
        return self._cancel_event

    def cancel(self) -> None:
        self._cancel_event.set()

    async def resolve(self) -> str:
        async with self._client_factory() as client:
            code = await self._request_device_code(client)
            await self._on_code(code.user_code, code.verification_uri)
            return await self._poll_for_token(client, code)

    async def _request_device_code(self, client: httpx.AsyncClient) -> DeviceCode:
        try:
            response = await client.post(
                DEVICE_CODE_URL,
                data={"client_id": self._client_id, "scope": self._scope},
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise AuthTransportError(f"Could not reach GitHub to start device authorization: {exc}") from exc

        payload = _payload(response)
        if response.status_code != 200 or "device_code" not in payload:
            detail = payload.get("error_description") or payload.get("error") or f"HTTP {response.status_code}"
            raise RemoteRejectedError(f"GitHub rejected the device authorization request: {detail}")
        return DeviceCode.model_validate(payload)

    async def _poll_for_token(self, client: httpx.AsyncClient, code: DeviceCode) -> str:
        interval = max(code.interval, 0)
        form = {
            "client_id": self._client_id,
            "device_code": code.device_code,
            "grant_type": DEVICE_GRANT_TYPE,
        }

        for attempt in range(1, self._max_attempts + 1):
            if await self._cancelled_while_waiting(interval):
                raise UserCancelledError("Device authorization was cancelled")

            try:
                response = await client.post(ACCESS_TOKEN_URL, data=form, headers={"Accept": "application/json"})
            except httpx.TransportError as exc:
                _LOG.debug("Device-flow poll %d failed: %s", attempt, exc)
                continue

            payload = _payload(response)
            token = payload.get("access_token")
            if isinstance(token, str) and token:
                return token

            error = payload.get("error")
            if error == "authorization_pending":
                _LOG.debug("Device-flow poll %d: authorization pending", attempt)
                continue
            if error == "slow_down":
                interval = int(payload.get("interval") or interval + SLOW_DOWN_INCREMENT)
                _LOG.debug("Device-flow poll %d: slowing down to %ds", attempt, interval)
                continue
            if error == "expired_token":
                raise AuthorizationExpiredError("The device code expired; run setup again")
            if error == "access_denied":
                raise AuthorizationDeniedError("Authorization was denied on GitHub")

            detail = payload.get("error_description") or error or f"HTTP {response.status_code}"
            raise AuthenticationError(f"Device authorization failed: {detail}")

        raise AuthorizationTimeoutError(f"Device authorization timed out after {self._max_attempts} attempts")

    async def _cancelled_while_waiting(self, seconds: float) -> bool:
        if self._cancel_event.is_set():
            return True
        try:
            await asyncio.wait_for(self._cancel_event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return False
        return True

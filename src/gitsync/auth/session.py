"""Auth session: credential verification and the persisted sync config."""

from __future__ import annotations

import logging

import httpx

from gitsync.auth.base import TokenResolver
from gitsync.contracts.config import RemoteConfig
from gitsync.contracts.exceptions import AuthTransportError, RemoteRejectedError
from gitsync.persistence.remote_config import RemoteConfigRepository
from gitsync.remote.client import GITHUB_API_URL, ClientFactory, default_client_factory, github_headers

_LOG = logging.getLogger(__name__)


class AuthSession:
    """Owns the in-memory :class:`RemoteConfig` for one process.

    The config is loaded once, replaced on successful authentication and
    persisted after every mutation.
    """

    def __init__(
        self,
        *,
        repository: RemoteConfigRepository,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._repository = repository
        self._client_factory = client_factory or default_client_factory()
        self._config: RemoteConfig | None = None

    @property
    def config(self) -> RemoteConfig | None:
        return self._config

    @property
    def is_authenticated(self) -> bool:
        return self._config is not None and self._config.token != ""

    @property
    def is_configured(self) -> bool:
        return self._config is not None and self._config.is_configured

    @property
    def token(self) -> str:
        return self._config.token if self._config is not None else ""

    @property
    def client_factory(self) -> ClientFactory:
        return self._client_factory

    def load(self) -> bool:
        """Load the persisted config. Returns ``True`` when a token is present."""
        self._config = self._repository.load()
        return self.is_authenticated

    async def verify_token(self, token: str) -> str:
        """Check *token* against ``GET /user`` and return the principal's login."""
        try:
            async with self._client_factory() as client:
                response = await client.get(f"{GITHUB_API_URL}/user", headers=github_headers(token))
        except httpx.HTTPError as exc:
            raise AuthTransportError(f"Could not reach GitHub to verify the token: {exc}") from exc

        if response.status_code in (401, 403):
            raise RemoteRejectedError("GitHub rejected the token; check that it is valid and has the gist scope")
        if response.status_code != 200:
            raise RemoteRejectedError(f"GitHub token check failed with HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise RemoteRejectedError("GitHub token check returned an unreadable response") from exc
        if not isinstance(body, dict):
            raise RemoteRejectedError("GitHub token check returned an unexpected response")
        login = body.get("login")
        return login if isinstance(login, str) else ""

    async def authenticate(self, resolver: TokenResolver) -> str:
        """Resolve, verify and persist a token. Returns the authenticated login.

        Nothing is persisted unless every step succeeds. A new token always
        starts with an unbound gist.
        """
        token = await resolver.resolve()
        login = await self.verify_token(token)
        self._config = RemoteConfig(token=token, gist_id="", gist_description="")
        self._repository.save(self._config)
        _LOG.info("Authenticated as %s", login)
        return login

    def bind_document(self, gist_id: str, description: str) -> None:
        if self._config is None:
            raise RemoteRejectedError("Not authenticated; run setup first")
        self._config = self._config.model_copy(update={"gist_id": gist_id, "gist_description": description})
        self._repository.save(self._config)

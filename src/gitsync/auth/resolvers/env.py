"""Environment token resolver."""

from __future__ import annotations

import os

from gitsync.auth.base import TokenResolver, check_token_format
from gitsync.contracts.exceptions import AuthenticationError

TOKEN_ENV = "GITHUB_TOKEN"


class EnvTokenResolver(TokenResolver):
    async def resolve(self) -> str:
        token = (os.getenv(TOKEN_ENV) or "").strip()
        if not token:
            raise AuthenticationError(f"{TOKEN_ENV} is not set or empty")
        return check_token_format(token)

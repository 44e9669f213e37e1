"""GitHub HTTP helpers shared by the auth session and the gist store."""

from __future__ import annotations

from collections.abc import Callable

import httpx

GITHUB_API_URL = "https://api.github.com"
GITHUB_LOGIN_URL = "https://github.com/login"

ClientFactory = Callable[[], httpx.AsyncClient]


def github_headers(token: str | None = None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "gitsync",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def default_client_factory(timeout: float = 10.0) -> ClientFactory:
    return lambda: httpx.AsyncClient(timeout=timeout)

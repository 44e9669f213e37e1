"""GitHub Gist implementation of the remote document store."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from gitsync.contracts.exceptions import StoreTransportError
from gitsync.contracts.remote import GistDescriptor, RemoteStore
from gitsync.remote.client import GITHUB_API_URL, ClientFactory, default_client_factory, github_headers
from gitsync.remote.discovery import filter_candidates

_LOG = logging.getLogger(__name__)

SETTINGS_FILENAME = "git-sync-settings.json"


class GistStore(RemoteStore):
    """Stores the snapshot as ``git-sync-settings.json`` inside one secret gist.

    Every failure is logged and reported as ``None`` / ``False``. Nothing is
    retried; the user re-runs the command instead.
    """

    def __init__(self, *, token: str, client_factory: ClientFactory | None = None) -> None:
        self._token = token
        self._client_factory = client_factory or default_client_factory()

    async def create_document(self, content: str, description: str) -> str | None:
        payload = {
            "description": description,
            "public": False,
            "files": {SETTINGS_FILENAME: {"content": content}},
        }
        try:
            response = await self._send("POST", "/gists", json=payload)
        except StoreTransportError as exc:
            _LOG.warning("Creating gist failed: %s", exc)
            return None
        if response.status_code != 201:
            _LOG.warning("Creating gist returned HTTP %d", response.status_code)
            return None
        body = _json_body(response, dict)
        gist_id = body.get("id") if body is not None else None
        if not isinstance(gist_id, str) or not gist_id:
            _LOG.warning("Creating gist returned no gist id")
            return None
        return gist_id

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        try:
            response = await self._send("GET", f"/gists/{document_id}")
        except StoreTransportError as exc:
            _LOG.warning("Downloading gist %s failed: %s", document_id, exc)
            return None
        if response.status_code != 200:
            _LOG.warning("Downloading gist %s returned HTTP %d", document_id, response.status_code)
            return None

        body = _json_body(response, dict)
        if body is None:
            _LOG.warning("Downloading gist %s returned an unreadable body", document_id)
            return None
        files = body.get("files")
        settings_file = files.get(SETTINGS_FILENAME) if isinstance(files, dict) else None
        if not isinstance(settings_file, dict):
            _LOG.warning("Gist %s has no %s file", document_id, SETTINGS_FILENAME)
            return None

        content = settings_file.get("content")
        if settings_file.get("truncated") and settings_file.get("raw_url"):
            content = await self._fetch_raw(settings_file["raw_url"])
        if not isinstance(content, str):
            return None

        try:
            payload = json.loads(content)
        except json.JSONDecodeError:
            _LOG.warning("Gist %s contains invalid JSON", document_id)
            return None
        return payload if isinstance(payload, dict) else None

    async def update_document(self, document_id: str, content: str, description: str) -> bool:
        payload = {
            "description": description,
            "files": {SETTINGS_FILENAME: {"content": content}},
        }
        try:
            response = await self._send("PATCH", f"/gists/{document_id}", json=payload)
        except StoreTransportError as exc:
            _LOG.warning("Uploading gist %s failed: %s", document_id, exc)
            return False
        if response.status_code != 200:
            _LOG.warning("Uploading gist %s returned HTTP %d", document_id, response.status_code)
            return False
        return True

    async def list_candidate_documents(self) -> list[GistDescriptor] | None:
        try:
            response = await self._send("GET", "/gists", params={"per_page": 100})
        except StoreTransportError as exc:
            _LOG.warning("Listing gists failed: %s", exc)
            return None
        if response.status_code != 200:
            _LOG.warning("Listing gists returned HTTP %d", response.status_code)
            return None

        entries = _json_body(response, list)
        if entries is None:
            _LOG.warning("Listing gists returned an unreadable body")
            return None

        descriptors: list[GistDescriptor] = []
        for raw in entries:
            try:
                descriptors.append(GistDescriptor.model_validate(raw))
            except ValidationError:
                _LOG.debug("Ignoring malformed gist entry: %r", raw.get("id") if isinstance(raw, dict) else raw)
        return filter_candidates(descriptors)

    async def _fetch_raw(self, raw_url: str) -> str | None:
        try:
            async with self._client_factory() as client:
                response = await client.get(raw_url, headers=github_headers(self._token))
        except httpx.HTTPError as exc:
            _LOG.warning("Fetching truncated gist content failed: %s", exc)
            return None
        return response.text if response.status_code == 200 else None

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        _LOG.debug("%s %s", method, path)
        try:
            async with self._client_factory() as client:
                return await client.request(
                    method,
                    f"{GITHUB_API_URL}{path}",
                    headers=github_headers(self._token),
                    **kwargs,
                )
        except httpx.HTTPError as exc:
            raise StoreTransportError(f"{method} {path}: {exc}") from exc


def _json_body(response: httpx.Response, expected: type[dict] | type[list]) -> Any:
    """Decode the response body, or ``None`` when it is not JSON of the *expected* shape."""
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, expected) else None

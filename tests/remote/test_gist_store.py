from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from gitsync.remote.gist import SETTINGS_FILENAME, GistStore


def _store(handler: Callable[[httpx.Request], httpx.Response]) -> GistStore:
    return GistStore(token="ghp_test", client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def _gist(gist_id: str, description: str | None, content: str | None = None) -> dict[str, object]:
    files: dict[str, object] = {}
    if content is not None:
        files[SETTINGS_FILENAME] = {"filename": SETTINGS_FILENAME, "content": content, "truncated": False}
    return {"id": gist_id, "description": description, "updated_at": "2024-03-01T10:00:00Z", "files": files}


@pytest.mark.asyncio
async def test_create_document_posts_secret_gist() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": "new123"})

    gist_id = await _store(handler).create_document('{"settings": {}}', "Git Sync - My Settings")

    assert gist_id == "new123"
    assert seen["method"] == "POST"
    assert seen["path"] == "/gists"
    assert seen["auth"] == "Bearer ghp_test"
    assert seen["body"] == {
        "description": "Git Sync - My Settings",
        "public": False,
        "files": {SETTINGS_FILENAME: {"content": '{"settings": {}}'}},
    }


@pytest.mark.asyncio
async def test_create_document_failure_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "Validation Failed"})

    assert await _store(handler).create_document("{}", "desc") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(201, json=["x"]),
        httpx.Response(201, text="<html>created</html>"),
        httpx.Response(201, json={"id": 42}),
    ],
)
async def test_create_document_unexpected_body_returns_none(response: httpx.Response) -> None:
    assert await _store(lambda request: response).create_document("{}", "desc") is None


@pytest.mark.asyncio
async def test_get_document_parses_settings_file() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/gists/abc"
        return httpx.Response(200, json=_gist("abc", "Git Sync", json.dumps({"settings": {"editor.tabSize": 2}})))

    assert await _store(handler).get_document("abc") == {"settings": {"editor.tabSize": 2}}


@pytest.mark.asyncio
async def test_get_document_follows_raw_url_when_truncated() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "gist.githubusercontent.com":
            return httpx.Response(200, text=json.dumps({"extensions": ["a.b"]}))
        payload = _gist("abc", "Git Sync")
        payload["files"] = {
            SETTINGS_FILENAME: {
                "content": '{"exten',
                "truncated": True,
                "raw_url": "https://gist.githubusercontent.com/u/abc/raw/git-sync-settings.json",
            }
        }
        return httpx.Response(200, json=payload)

    assert await _store(handler).get_document("abc") == {"extensions": ["a.b"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, json={"message": "Not Found"}),
        httpx.Response(200, json=_gist("abc", "Git Sync")),
        httpx.Response(200, json=_gist("abc", "Git Sync", "not json")),
        httpx.Response(200, text="<html>Sign in to continue</html>"),
        httpx.Response(200, json=["abc"]),
        httpx.Response(200, json={"id": "abc", "files": ["git-sync-settings.json"]}),
    ],
)
async def test_get_document_failures_return_none(response: httpx.Response) -> None:
    assert await _store(lambda request: response).get_document("abc") is None


@pytest.mark.asyncio
async def test_get_document_transport_error_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline")

    assert await _store(handler).get_document("abc") is None


@pytest.mark.asyncio
async def test_update_document_patches_settings_file() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_gist("abc", "Git Sync"))

    assert await _store(handler).update_document("abc", '{"a": 1}', "Git Sync")
    assert seen["method"] == "PATCH"
    assert seen["body"] == {"description": "Git Sync", "files": {SETTINGS_FILENAME: {"content": '{"a": 1}'}}}


@pytest.mark.asyncio
async def test_update_document_failure_returns_false() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    assert await _store(handler).update_document("gone", "{}", "desc") is False


@pytest.mark.asyncio
async def test_list_candidate_documents_filters_by_tag() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["per_page"] == "100"
        return httpx.Response(
            200,
            json=[
                _gist("1", "Git Sync - My Settings"),
                _gist("2", "unrelated notes"),
                _gist("3", None),
                _gist("4", "old cursor-settings backup"),
            ],
        )

    candidates = await _store(handler).list_candidate_documents()

    assert candidates is not None
    assert [candidate.id for candidate in candidates] == ["1", "4"]
    assert candidates[0].updated_at is not None


@pytest.mark.asyncio
async def test_list_candidate_documents_failure_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "Bad credentials"})

    assert await _store(handler).list_candidate_documents() is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>Sign in to continue</html>"),
        httpx.Response(200, json={"message": "not a list"}),
    ],
)
async def test_list_candidate_documents_unexpected_body_returns_none(response: httpx.Response) -> None:
    assert await _store(lambda request: response).list_candidate_documents() is None

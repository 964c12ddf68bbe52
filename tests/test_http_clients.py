"""Tests for HTTP-based adapters."""

import asyncio
import base64
from urllib.parse import parse_qs

import httpx
import pytest

from nutrition_coach.adapters.fatsecret_client import HttpxFatSecretClient
from nutrition_coach.errors import AuthError, SearchError


def _client(handler) -> HttpxFatSecretClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxFatSecretClient(
        token_url="https://oauth.test/connect/token",
        api_url="https://api.test/rest/server.api",
        http_client=httpx.AsyncClient(transport=transport),
    )


def _form(request: httpx.Request) -> dict[str, str]:
    parsed = parse_qs(request.content.decode())
    return {key: values[0] for key, values in parsed.items()}


def test_request_token_uses_basic_auth_and_client_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"access_token": "abc", "expires_in": 3600})

    client = _client(handler)

    payload = asyncio.run(client.request_token("my-id", "my-secret"))

    assert payload == {"access_token": "abc", "expires_in": 3600}
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/connect/token"
    expected = base64.b64encode(b"my-id:my-secret").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert _form(request) == {"grant_type": "client_credentials", "scope": "basic"}


def test_request_token_raises_auth_error_on_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "invalid_client"})

    client = _client(handler)

    with pytest.raises(AuthError) as exc_info:
        asyncio.run(client.request_token("bad", "creds"))

    assert exc_info.value.status_code == 400


def test_search_foods_sends_form_body_with_bearer_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods_search": {"total_results": "0"}})

    client = _client(handler)

    payload = asyncio.run(client.search_foods("token-1", "oats", 25))

    assert payload == {"foods_search": {"total_results": "0"}}
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/rest/server.api"
    assert request.headers["Authorization"] == "Bearer token-1"
    assert _form(request) == {
        "method": "foods.search.v4",
        "search_expression": "oats",
        "max_results": "25",
        "page_number": "0",
        "format": "json",
        "flag_default_serving": "true",
    }


def test_search_foods_raises_search_error_with_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "expired"})

    client = _client(handler)

    with pytest.raises(SearchError) as exc_info:
        asyncio.run(client.search_foods("stale", "oats", 10))

    assert exc_info.value.status_code == 401


def test_close_closes_http_session() -> None:
    client = _client(lambda request: httpx.Response(200, json={}))

    asyncio.run(client.close())

    assert client.http_client.is_closed

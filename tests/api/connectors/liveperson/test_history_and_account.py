"""Testes da busca no Messaging History e do nickname de agente."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.liveperson import get_agent_nickname, search_consumer_conversations
from api.connectors.liveperson.history import build_oauth1_auth
from app.infra.http import HttpClient, HttpClientConfig

OAUTH_PARAMS = {
    "consumer_key": "ck",
    "consumer_secret": "cs",
    "token": "tk",
    "token_secret": "ts",
}


def _client(handler) -> HttpClient:
    return HttpClient(HttpClientConfig(transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_search_consumer_conversations_is_oauth1_signed() -> None:
    seen: list[httpx.Request] = []
    history = {
        "_metadata": {"count": 1},
        "conversationHistoryRecords": [{"info": {"conversationId": "conv-9"}}],
    }

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=history)

    result = await search_consumer_conversations(
        _client(handler), "123", "history.example.net", "user-1", "OPEN", OAUTH_PARAMS
    )

    assert result == history
    request = seen[0]
    assert request.url.path == "/messaging_history/api/account/123/conversations/consumer/search"
    assert json.loads(request.content) == {"consumer": "user-1", "status": ["OPEN"]}
    assert request.headers["content-type"] == "application/json"
    authorization = request.headers["authorization"]
    assert authorization.startswith("OAuth ")
    assert 'oauth_consumer_key="ck"' in authorization
    assert 'oauth_token="tk"' in authorization
    assert 'oauth_signature_method="HMAC-SHA1"' in authorization


def test_oauth1_signer_keeps_json_body() -> None:
    assert build_oauth1_auth(OAUTH_PARAMS).force_include_body is True


@pytest.mark.asyncio
async def test_search_rejects_unknown_status() -> None:
    with pytest.raises(ValueError):
        await search_consumer_conversations(
            _client(lambda request: httpx.Response(200, json={})),
            "123",
            "history.example.net",
            "user-1",
            "PENDING",
            OAUTH_PARAMS,
        )


@pytest.mark.asyncio
async def test_get_agent_nickname() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "42", "nickname": "Bia"})

    nickname = await get_agent_nickname(_client(handler), "123", "accdn.example.net", "42")

    assert nickname == "Bia"
    assert seen[0].url.path == "/api/account/123/configuration/le-users/users/42"


@pytest.mark.asyncio
async def test_get_agent_nickname_absent() -> None:
    nickname = await get_agent_nickname(
        _client(lambda request: httpx.Response(200, json={"id": "42"})),
        "123",
        "accdn.example.net",
        "42",
    )
    assert nickname is None

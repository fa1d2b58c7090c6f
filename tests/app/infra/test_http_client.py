"""Testes do cliente HTTP base."""

from __future__ import annotations

import httpx
import pytest

from app.infra.http import HttpClient, HttpClientConfig
from utils.errors import TransportError


def _client(handler, **config) -> HttpClient:
    return HttpClient(HttpClientConfig(transport=httpx.MockTransport(handler), **config))


@pytest.mark.asyncio
async def test_merges_default_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = _client(handler, default_headers={"X-Default": "1", "X-Override": "a"})
    response = await client.get(
        "https://api.example.net/x",
        operation="probe",
        headers={"X-Override": "b"},
    )

    assert response.json() == {"ok": True}
    assert seen[0].headers["x-default"] == "1"
    assert seen[0].headers["x-override"] == "b"


@pytest.mark.asyncio
async def test_non_success_status_raises_transport_error() -> None:
    client = _client(lambda request: httpx.Response(503))

    with pytest.raises(TransportError, match=r"\[probe\] 503") as exc_info:
        await client.post("https://api.example.net/x", operation="probe")

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_status_check_can_be_disabled() -> None:
    client = _client(lambda request: httpx.Response(404))

    response = await client.get(
        "https://api.example.net/x",
        operation="probe",
        raise_for_status=False,
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TransportError, match="ReadTimeout") as exc_info:
        await _client(handler).put("https://api.example.net/x", operation="probe")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

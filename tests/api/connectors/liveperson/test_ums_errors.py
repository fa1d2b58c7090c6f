"""Testes do parsing de respostas de criação de conversa."""

from __future__ import annotations

import pytest

from api.connectors.liveperson import extract_existing_user_id, find_response_for


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("User 8f1e2d_3a already has an open conversation on brand 1", "8f1e2d_3a"),
        ("Error: User abc123 already exists", "abc123"),
        ("Conversation rejected", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_existing_user_id(message: str | None, expected: str | None) -> None:
    assert extract_existing_user_id(message) == expected


def test_find_response_matches_request_id() -> None:
    responses = [
        {"reqId": "req-b", "code": 200, "body": {"conversationId": "c-1"}},
        {"reqId": "req-a", "code": 200, "body": "OK"},
    ]
    assert find_response_for(responses, "req-b", fallback_index=1) is responses[0]


def test_find_response_falls_back_to_index() -> None:
    responses = [{"code": 200}, {"code": 200, "body": {"conversationId": "c-1"}}]
    assert find_response_for(responses, "missing", fallback_index=1) is responses[1]


@pytest.mark.parametrize("responses", [None, {"code": 200}, [], [{"code": 200}]])
def test_find_response_returns_none_when_absent(responses: object) -> None:
    assert find_response_for(responses, "req-x", fallback_index=1) is None

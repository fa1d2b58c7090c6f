"""Testes do parse do webhook e da extração de changes."""

from __future__ import annotations

import pytest

from api.connectors.liveperson.webhook import (
    InvalidJsonError,
    extract_changes,
    parse_webhook_body,
)


def test_parse_webhook_body_valid() -> None:
    assert parse_webhook_body(b'{"body": {"changes": []}}') == {"body": {"changes": []}}


def test_parse_webhook_body_empty_is_object() -> None:
    assert parse_webhook_body(b"") == {}


@pytest.mark.parametrize("raw", [b"{not json", b"[1, 2]", b"\x80abc"])
def test_parse_webhook_body_invalid(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError):
        parse_webhook_body(raw)


def test_extract_changes_preserves_order() -> None:
    payload = {"body": {"changes": [{"n": 1}, {"n": 2}, {"n": 3}]}}
    assert extract_changes(payload) == [{"n": 1}, {"n": 2}, {"n": 3}]


@pytest.mark.parametrize(
    "payload",
    [{}, {"body": None}, {"body": {}}, {"body": {"changes": "x"}}],
)
def test_extract_changes_missing(payload: dict) -> None:
    assert extract_changes(payload) == []

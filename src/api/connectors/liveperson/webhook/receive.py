"""Parse do webhook e extração das mudanças a re-emitir."""

from __future__ import annotations

import json
from typing import Any


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo bruto do webhook.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto.
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload


def extract_changes(payload: dict[str, Any]) -> list[Any]:
    """Retorna `body.changes` na ordem recebida; lista vazia se ausente."""
    body = payload.get("body")
    if not isinstance(body, dict):
        return []
    changes = body.get("changes")
    if not isinstance(changes, list):
        return []
    return list(changes)

"""Parsing das respostas UMS de criação de conversa."""

from __future__ import annotations

import re
from typing import Any

# Formato da mensagem da plataforma: "User <id> already has an open conversation ..."
# TODO: trocar pelo campo estruturado quando a API de criação expuser o userId no erro.
_EXISTING_USER_PATTERN = re.compile(r"User (\w+) already")


def extract_existing_user_id(message: str | None) -> str | None:
    """Extrai o userId interno da mensagem de conversa duplicada."""
    if not message:
        return None
    match = _EXISTING_USER_PATTERN.search(message)
    return match.group(1) if match else None


def find_response_for(
    responses: Any,
    request_id: str,
    fallback_index: int,
) -> dict[str, Any] | None:
    """Localiza o resultado de uma requisição no lote de respostas.

    Casa pelo `reqId`; sem correspondência, usa a posição no lote.
    """
    if not isinstance(responses, list):
        return None
    for item in responses:
        if isinstance(item, dict) and item.get("reqId") == request_id:
            return item
    if 0 <= fallback_index < len(responses) and isinstance(responses[fallback_index], dict):
        return responses[fallback_index]
    return None

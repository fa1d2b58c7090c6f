"""Consulta de configuração da conta (usuários/agentes)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.infra.http import HttpClient


async def get_agent_nickname(
    http: HttpClient,
    account_id: str,
    ac_cdn_domain: str,
    pid: str,
) -> str | None:
    """Retorna o nickname do agente identificado por `pid`."""
    response = await http.get(
        f"https://{ac_cdn_domain}/api/account/{account_id}/configuration/le-users/users/{pid}",
        operation="get_agent_nickname",
    )
    body = response.json()
    return body.get("nickname") if isinstance(body, dict) else None

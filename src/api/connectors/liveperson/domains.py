"""Resolução do diretório de domínios da conta (CSDS)."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.constants.liveperson import CSDS_API_VERSION
from config.settings.liveperson import DEFAULT_CSDS_DOMAIN
from utils.errors import ResolutionError, TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.infra.http import HttpClient

logger = logging.getLogger(__name__)


def build_domains_url(account_id: str, csds_domain: str = DEFAULT_CSDS_DOMAIN) -> str:
    return f"https://{csds_domain}/api/account/{account_id}/service/baseURI.json"


async def resolve_domains(
    http: HttpClient,
    account_id: str,
    csds_domain: str = DEFAULT_CSDS_DOMAIN,
) -> Mapping[str, str]:
    """Busca o mapa serviço → host base da conta.

    Args:
        http: Cliente HTTP
        account_id: ID da conta
        csds_domain: Domínio do CSDS

    Returns:
        Mapa imutável `{service: baseURI}`.

    Raises:
        ResolutionError: Status não-2xx, falha de rede ou `baseURIs` ausente,
            vazio ou com entradas sem `service`/`baseURI`.
    """
    operation = "resolve_domains"
    try:
        response = await http.get(
            build_domains_url(account_id, csds_domain),
            operation=operation,
            params={"version": CSDS_API_VERSION},
            raise_for_status=False,
        )
    except TransportError as exc:
        raise ResolutionError(str(exc)) from exc

    if not response.is_success:
        raise ResolutionError(
            f"[{operation}] {response.status_code} {response.reason_phrase}"
        )

    try:
        body = response.json()
    except ValueError as exc:
        raise ResolutionError(f"[{operation}] response is not JSON") from exc

    entries = body.get("baseURIs") if isinstance(body, dict) else None
    if not entries:
        raise ResolutionError(f"[{operation}] baseURIs missing from response")
    if not isinstance(entries, list):
        raise ResolutionError(f"[{operation}] baseURIs is not a list")

    domains: dict[str, str] = {}
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("service") or not entry.get("baseURI"):
            raise ResolutionError(f"[{operation}] malformed baseURIs entry: {entry!r}")
        domains[entry["service"]] = entry["baseURI"]
    logger.info(
        "domains_resolved",
        extra={"account_id": account_id, "service_count": len(domains)},
    )
    return MappingProxyType(domains)

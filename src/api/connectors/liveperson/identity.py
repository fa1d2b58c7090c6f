"""Tokens de identidade: JWT da aplicação (Sentinel) e JWS do consumidor (IDP)."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any

from app.constants.liveperson import IDP_API_VERSION, SENTINEL_API_VERSION
from utils.errors import ResolutionError

if TYPE_CHECKING:
    from app.infra.http import HttpClient

logger = logging.getLogger(__name__)


async def get_app_jwt(
    http: HttpClient,
    account_id: str,
    sentinel_domain: str,
    installation_id: str,
    secret: str,
) -> dict[str, Any]:
    """Obtém o JWT da aplicação via client_credentials.

    Returns:
        Body da resposta (`access_token`, ...).

    Raises:
        TransportError: Falha de rede ou status não-2xx.
        ResolutionError: Resposta sem `access_token`.
    """
    response = await http.post(
        f"https://{sentinel_domain}/sentinel/api/account/{account_id}/app/token",
        operation="get_app_jwt",
        params={
            "v": SENTINEL_API_VERSION,
            "grant_type": "client_credentials",
            "client_id": installation_id,
            "client_secret": secret,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    body = response.json()
    if not isinstance(body, dict) or not body.get("access_token"):
        raise ResolutionError("[get_app_jwt] access_token missing from response")
    return body


def random_consumer_id() -> str:
    return f"random_id.{random.randrange(100_000_000_000)}"


async def get_consumer_jws(
    http: HttpClient,
    account_id: str,
    idp_domain: str,
    app_jwt: str,
    ext_consumer_id: str | None = None,
) -> dict[str, Any]:
    """Troca o JWT da aplicação por um JWS do consumidor.

    Args:
        ext_consumer_id: ID externo do consumidor; aleatório se None.

    Returns:
        Body da resposta (`token`, ...) acrescido de `externalConsumerId`.

    Raises:
        TransportError: Falha de rede ou status não-2xx.
        ResolutionError: Resposta sem `token`.
    """
    consumer_id = ext_consumer_id or random_consumer_id()
    response = await http.post(
        f"https://{idp_domain}/api/account/{account_id}/consumer",
        operation="get_consumer_jws",
        params={"v": IDP_API_VERSION},
        json={"ext_consumer_id": consumer_id},
        headers={"Authorization": app_jwt},
    )
    body = response.json()
    if not isinstance(body, dict) or not body.get("token"):
        raise ResolutionError(f"[get_consumer_jws] jws not obtained for {consumer_id}")

    logger.debug("consumer_jws_obtained", extra={"external_consumer_id": consumer_id})
    return {**body, "externalConsumerId": consumer_id}

"""Busca de conversas do consumidor no Messaging History (OAuth1)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from authlib.integrations.httpx_client import OAuth1Auth

from app.constants.liveperson import ConversationStatus

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.infra.http import HttpClient


def build_oauth1_auth(oauth_params: Mapping[str, str]) -> OAuth1Auth:
    """Cria o signer OAuth1 HMAC-SHA1 a partir da tupla de credenciais.

    O body JSON não entra na assinatura, mas precisa seguir no request.
    """
    return OAuth1Auth(
        client_id=oauth_params["consumer_key"],
        client_secret=oauth_params["consumer_secret"],
        token=oauth_params["token"],
        token_secret=oauth_params["token_secret"],
        force_include_body=True,
    )


async def search_consumer_conversations(
    http: HttpClient,
    account_id: str,
    msg_hist_domain: str,
    consumer_id: str,
    status: ConversationStatus | str,
    oauth_params: Mapping[str, str],
) -> dict[str, Any]:
    """Lista as conversas do consumidor filtradas por status.

    Returns:
        Body da resposta (`_metadata`, `conversationHistoryRecords`).

    Raises:
        TransportError: Falha de rede ou status não-2xx.
    """
    response = await http.post(
        f"https://{msg_hist_domain}/messaging_history/api/account/{account_id}"
        "/conversations/consumer/search",
        operation="search_consumer_conversations",
        json={"consumer": consumer_id, "status": [str(ConversationStatus(status))]},
        auth=build_oauth1_auth(oauth_params),
    )
    return response.json()

"""Cliente da Send API (UMS): despacho autenticado em nome do consumidor.

Toda chamada leva o JWT da aplicação (`Authorization`) e o JWS do
consumidor (`X-LP-ON-BEHALF`). Sem retry: falhas sobem como TransportError.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from app.constants.liveperson import SERVICE_ASYNC_MESSAGING, SERVICE_SWIFT, UMS_API_VERSION
from app.infra.http import HttpClient, HttpClientConfig
from utils.errors import AuthExpiredError, ConfigurationMissingError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    import httpx

    from api.payload_builders.liveperson import UmsRequest

logger = logging.getLogger(__name__)

INTEGRATION_NAME = "lp-consumer-connector"
INTEGRATION_VERSION = "1.0.0"
USER_AGENT = f"{INTEGRATION_NAME}/{INTEGRATION_VERSION}"


def build_client_properties(app_id: str) -> str:
    """Header Client-Properties serializado."""
    return json.dumps(
        {
            "type": ".ams.headers.ClientProperties",
            "appId": app_id,
            "features": ["AUTO_MESSAGE"],
            "integration": INTEGRATION_NAME,
            "integrationVersion": INTEGRATION_VERSION,
        },
        separators=(",", ":"),
    )


class SendApiClient(HttpClient):
    """Despacha requisições UMS para a conta.

    Args:
        account_id: ID da conta
        domains: Diretório de domínios resolvido
        token_provider: Retorna o JWT atual da aplicação
        app_id: appId do header Client-Properties
        config: Configuração HTTP base
    """

    def __init__(
        self,
        *,
        account_id: str,
        domains: Mapping[str, str],
        token_provider: Callable[[], str | None],
        app_id: str = "unspecified",
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._account_id = account_id
        self._domains = domains
        self._token_provider = token_provider
        self._client_properties = build_client_properties(app_id)

    @property
    def conversation_url(self) -> str:
        host = self._domains.get(SERVICE_ASYNC_MESSAGING)
        if not host:
            raise ConfigurationMissingError(
                f"[send_api] domain {SERVICE_ASYNC_MESSAGING} unavailable"
            )
        return f"https://{host}/api/account/{self._account_id}/messaging/consumer/conversation"

    def _headers(self, jws: str) -> dict[str, str]:
        app_jwt = self._token_provider()
        if not app_jwt:
            raise AuthExpiredError("[send_api] app token not available")
        return {
            "Authorization": app_jwt,
            "X-LP-ON-BEHALF": jws,
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "Client-Properties": self._client_properties,
        }

    async def create_conversation(self, jws: str, events: Sequence[UmsRequest]) -> Any:
        """Cria conversa com um lote de eventos (perfil + request conversation).

        Returns:
            Lista de resultados por evento, como devolvida pela plataforma.
        """
        response = await self.post(
            self.conversation_url,
            operation="create_conversation",
            params={"v": UMS_API_VERSION},
            json=[event.to_dict() for event in events],
            headers=self._headers(jws),
        )
        return response.json()

    async def send(self, jws: str, event: UmsRequest) -> Any:
        """Envia um único evento a uma conversa."""
        response = await self.post(
            f"{self.conversation_url}/send",
            operation="send",
            params={"v": UMS_API_VERSION},
            json=event.to_dict(),
            headers=self._headers(jws),
        )
        logger.debug("ums_event_sent", extra={"event_type": event.type, "request_id": event.id})
        return response.json()

    async def upload_file(self, path: str | Path, upload_params: Mapping[str, Any]) -> httpx.Response:
        """Envia o arquivo para a URL pré-assinada do storage (Swift).

        Args:
            path: Caminho local do arquivo
            upload_params: Body da resposta a GenerateURLForUploadFile
                (`relativePath`, `queryParams.temp_url_sig`, `queryParams.temp_url_expires`)

        Returns:
            Response HTTP bruto.
        """
        host = self._domains.get(SERVICE_SWIFT)
        if not host:
            raise ConfigurationMissingError(f"[upload_file] domain {SERVICE_SWIFT} unavailable")

        file_path = Path(path)
        content = await asyncio.to_thread(file_path.read_bytes)
        response = await self.put(
            f"https://{host}{upload_params['relativePath']}",
            operation="upload_file",
            params=dict(upload_params.get("queryParams") or {}),
            data={"async": "true", "resources": "{}"},
            files={"application": (file_path.name, content)},
            headers={"User-Agent": USER_AGENT},
        )
        logger.info(
            "file_uploaded",
            extra={"size_bytes": len(content), "status_code": response.status_code},
        )
        return response

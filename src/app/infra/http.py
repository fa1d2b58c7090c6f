"""Cliente HTTP base para as chamadas às APIs da plataforma.

Sem retry nem backoff: uma falha de transporte ou status não-2xx é
devolvida ao chamador como TransportError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    Attributes:
        timeout_seconds: Timeout por requisição
        default_headers: Headers enviados em toda requisição
        verify_ssl: Valida certificados TLS
        transport: Transport httpx alternativo (ex: httpx.MockTransport em testes)
    """

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        auth: httpx.Auth | None = None,
        raise_for_status: bool = True,
    ) -> httpx.Response:
        """Executa a requisição e devolve o response.

        Args:
            method: Verbo HTTP
            url: URL absoluta
            operation: Nome da operação, usado nas mensagens de erro e logs
            raise_for_status: Se True, status não-2xx vira TransportError

        Raises:
            TransportError: Falha de rede ou status não-2xx
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    files=files,
                    data=data,
                    headers=merged_headers,
                    auth=auth,
                )
        except httpx.HTTPError as exc:
            logger.warning(
                "http_transport_error",
                extra={
                    "operation": operation,
                    "method": method,
                    "error_type": type(exc).__name__,
                },
            )
            raise TransportError(f"[{operation}] {type(exc).__name__}: {exc}") from exc

        if raise_for_status and not response.is_success:
            logger.warning(
                "http_status_error",
                extra={
                    "operation": operation,
                    "method": method,
                    "status_code": response.status_code,
                },
            )
            raise TransportError(
                f"[{operation}] {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        logger.debug(
            "http_request_ok",
            extra={
                "operation": operation,
                "method": method,
                "status_code": response.status_code,
            },
        )
        return response

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

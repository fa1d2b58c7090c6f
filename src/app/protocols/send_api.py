"""Contrato mínimo do despacho outbound usado pelo Connector.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    import httpx

    from api.payload_builders.liveperson import UmsRequest


class SendApiProtocol(Protocol):
    """Despacho autenticado em nome de um consumidor."""

    async def create_conversation(self, jws: str, events: Sequence[UmsRequest]) -> Any: ...

    async def send(self, jws: str, event: UmsRequest) -> Any: ...

    async def upload_file(
        self,
        path: str | Path,
        upload_params: Mapping[str, Any],
    ) -> httpx.Response: ...

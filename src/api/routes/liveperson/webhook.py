"""Endpoint de webhook da plataforma.

Endpoint:
- POST /event/{event_type}: cada entrada de `body.changes` é publicada como
  ConnectorEvent(kind=WEBHOOK, name=event_type), na ordem do array.

A resposta é sempre 200 com corpo vazio, inclusive para JSON inválido ou
payload sem `changes`: o webhook é fire-and-forget.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from api.connectors.liveperson.webhook import (
    InvalidJsonError,
    extract_changes,
    parse_webhook_body,
)
from app.events import ConnectorEvent
from app.observability import CORRELATION_HEADER, correlation_scope

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/event/{event_type}")
async def receive_event(event_type: str, request: Request) -> Response:
    """Recebe notificação da plataforma e re-emite as mudanças."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)):
        raw_body = await request.body()
        try:
            payload = parse_webhook_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"event_type": event_type, "error": str(exc)},
            )
            return Response(status_code=status.HTTP_200_OK)

        changes = extract_changes(payload)
        logger.info(
            "webhook_received",
            extra={
                "event_type": event_type,
                "change_count": len(changes),
                "payload_size": len(raw_body),
            },
        )

        event_bus = getattr(request.app.state, "event_bus", None)
        if event_bus is None:
            logger.warning("webhook_event_bus_unavailable", extra={"event_type": event_type})
            return Response(status_code=status.HTTP_200_OK)

        for change in changes:
            await event_bus.publish(ConnectorEvent.webhook(event_type, change))

        return Response(status_code=status.HTTP_200_OK)

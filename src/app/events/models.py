"""Tipos de evento publicados pelo conector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class EventKind(StrEnum):
    """Categorias de evento do conector."""

    CONNECTOR_READY = "connector.ready"
    DOMAINS_RETRIEVED = "connector.domains_retrieved"
    SENDER_READY = "sender.ready"
    SENDER_ERROR = "sender.error"
    TOKEN_REFRESHED = "sender.token_refreshed"
    LISTENER_READY = "listener.ready"
    CONVERSATION_OPENED = "conversation.opened"
    DUPLICATE_DETECTED = "conversation.duplicate_detected"
    WEBHOOK = "webhook"


@dataclass(frozen=True, slots=True)
class ConnectorEvent:
    """Evento publicado no EventBus.

    Attributes:
        kind: Categoria do evento
        name: Para WEBHOOK, o segmento `type` da rota; nos demais, igual a kind
        payload: Entrada de `changes` (WEBHOOK) ou dados do evento
    """

    kind: EventKind
    name: str
    payload: Any = None

    @classmethod
    def webhook(cls, event_type: str, change: Any) -> ConnectorEvent:
        return cls(kind=EventKind.WEBHOOK, name=event_type, payload=change)

    @classmethod
    def of(cls, kind: EventKind, payload: Any = None) -> ConnectorEvent:
        return cls(kind=kind, name=str(kind), payload=payload)

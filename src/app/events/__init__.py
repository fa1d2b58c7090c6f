"""Eventos do conector: categorias tipadas e barramento de assinaturas."""

from app.events.bus import EventBus
from app.events.models import ConnectorEvent, EventKind

__all__ = [
    "ConnectorEvent",
    "EventBus",
    "EventKind",
]

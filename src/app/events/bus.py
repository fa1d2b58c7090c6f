"""Barramento de eventos com assinaturas tipadas.

Callbacks podem ser síncronos ou coroutines. Um assinante que falha é
logado e não interrompe a entrega aos demais.
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any

from app.events.models import ConnectorEvent, EventKind

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    EventCallback = Callable[[ConnectorEvent], Awaitable[None] | None]

logger = logging.getLogger(__name__)


class EventBus:
    """Fan-out de ConnectorEvent para os assinantes registrados."""

    def __init__(self) -> None:
        self._by_kind: dict[EventKind, list[EventCallback]] = defaultdict(list)
        self._by_webhook: dict[str, list[EventCallback]] = defaultdict(list)
        self._any: list[EventCallback] = []

    def subscribe(self, kind: EventKind, callback: EventCallback) -> None:
        """Assina todos os eventos de uma categoria."""
        self._by_kind[kind].append(callback)

    def subscribe_webhook(self, event_type: str, callback: EventCallback) -> None:
        """Assina eventos de webhook de um `type` específico."""
        self._by_webhook[event_type].append(callback)

    def subscribe_all(self, callback: EventCallback) -> None:
        """Assina todos os eventos."""
        self._any.append(callback)

    def unsubscribe(self, callback: EventCallback) -> None:
        """Remove o callback de todas as assinaturas."""
        for callbacks in (*self._by_kind.values(), *self._by_webhook.values(), self._any):
            while callback in callbacks:
                callbacks.remove(callback)

    async def publish(self, event: ConnectorEvent) -> int:
        """Entrega o evento, na ordem de assinatura.

        Returns:
            Número de callbacks executados com sucesso.
        """
        delivered = 0
        for callback in self._targets(event):
            try:
                result = callback(event)
                if inspect.isawaitable(result):
                    await result
                delivered += 1
            except Exception as exc:
                logger.error(
                    "event_subscriber_failed",
                    extra={
                        "event_kind": str(event.kind),
                        "event_name": event.name,
                        "error_type": type(exc).__name__,
                    },
                    exc_info=True,
                )
        return delivered

    def _targets(self, event: ConnectorEvent) -> list[Any]:
        targets = list(self._by_kind.get(event.kind, ()))
        if event.kind is EventKind.WEBHOOK:
            targets.extend(self._by_webhook.get(event.name, ()))
        targets.extend(self._any)
        return targets

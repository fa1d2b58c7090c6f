"""Protocolos de agendamento usados pelo gerenciador de credenciais."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class ScheduledHandle(Protocol):
    """Handle cancelável de uma execução agendada."""

    def cancel(self) -> None: ...


class SchedulerProtocol(Protocol):
    """Agenda uma coroutine para daqui a `delay_seconds`."""

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> ScheduledHandle: ...

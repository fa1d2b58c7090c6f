"""Scheduler manual para testes deterministas de renovação de token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class FakeHandle:
    delay_seconds: float
    callback: Callable[[], Awaitable[None]]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Registra os timers em vez de dispará-los; `fire_next` executa o pendente."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> FakeHandle:
        handle = FakeHandle(delay_seconds, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [handle for handle in self.handles if not handle.cancelled]

    async def fire_next(self) -> None:
        handle = self.pending[0]
        handle.cancelled = True
        await handle.callback()

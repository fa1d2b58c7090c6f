"""Scheduler asyncio com handle cancelável."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class AsyncioTimerHandle:
    """Handle que cancela o timer pendente ou a execução já iniciada."""

    def __init__(self) -> None:
        self._timer: asyncio.TimerHandle | None = None
        self._task: asyncio.Task[None] | None = None
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
        if self._task is not None and not self._task.done():
            self._task.cancel()


class AsyncioScheduler:
    """Implementação de SchedulerProtocol sobre `loop.call_later`.

    Mantém referência às tasks disparadas até terminarem.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._tasks: set[asyncio.Task[None]] = set()

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> AsyncioTimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        handle = AsyncioTimerHandle()

        def _fire() -> None:
            task = loop.create_task(callback())
            handle._task = task
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        handle._timer = loop.call_later(max(delay_seconds, 0.0), _fire)
        return handle

"""Testes do ciclo de renovação do JWT da aplicação."""

from __future__ import annotations

import pytest
from jose import jwt

from app.events import ConnectorEvent, EventBus, EventKind
from app.infra.auth import TokenManager, compute_refresh_delay, decode_expiry
from tests.fakes.fake_scheduler import FakeScheduler
from utils.errors import AuthExpiredError, TransportError

NOW = 1_700_000_000.0


def _token(expires_in: float) -> str:
    return jwt.encode({"exp": int(NOW + expires_in)}, "k", algorithm="HS256")


class _TokenSource:
    """Fonte de tokens sequenciais; um item Exception é levantado."""

    def __init__(self, *items: object) -> None:
        self._items = list(items)
        self.calls = 0

    async def __call__(self) -> dict[str, object]:
        item = self._items[min(self.calls, len(self._items) - 1)]
        self.calls += 1
        if isinstance(item, Exception):
            raise item
        return {"access_token": item}


def _collect(bus: EventBus) -> list[ConnectorEvent]:
    received: list[ConnectorEvent] = []
    bus.subscribe_all(received.append)
    return received


def _manager(source: _TokenSource, bus: EventBus, scheduler: FakeScheduler) -> TokenManager:
    return TokenManager(source, bus, scheduler=scheduler, clock=lambda: NOW)


class TestDecodeExpiry:
    def test_reads_exp_claim(self) -> None:
        assert decode_expiry(_token(3600)) == NOW + 3600

    def test_malformed_token(self) -> None:
        with pytest.raises(AuthExpiredError, match="malformed"):
            decode_expiry("not-a-jwt")

    def test_missing_exp(self) -> None:
        token = jwt.encode({"sub": "app"}, "k", algorithm="HS256")
        with pytest.raises(AuthExpiredError, match="exp"):
            decode_expiry(token)


@pytest.mark.parametrize(
    ("expires_at", "now", "expected"),
    [(NOW + 3600, NOW, 2880.0), (NOW + 10, NOW, 8.0), (NOW - 5, NOW, 0.0)],
)
def test_compute_refresh_delay(expires_at: float, now: float, expected: float) -> None:
    assert compute_refresh_delay(expires_at, now) == pytest.approx(expected)


@pytest.mark.asyncio
async def test_start_schedules_refresh_at_eighty_percent() -> None:
    bus = EventBus()
    received = _collect(bus)
    scheduler = FakeScheduler()
    manager = _manager(_TokenSource(_token(3600)), bus, scheduler)

    await manager.start()

    assert manager.token == _token(3600)
    assert manager.expires_at == NOW + 3600
    assert len(scheduler.handles) == 1
    assert scheduler.handles[0].delay_seconds == pytest.approx(2880.0)
    assert [event.kind for event in received] == [EventKind.TOKEN_REFRESHED, EventKind.SENDER_READY]


@pytest.mark.asyncio
async def test_each_refresh_schedules_exactly_one_timer() -> None:
    scheduler = FakeScheduler()
    source = _TokenSource(_token(100), _token(200), _token(300))
    manager = _manager(source, EventBus(), scheduler)

    await manager.start()
    await scheduler.fire_next()
    await scheduler.fire_next()

    assert source.calls == 3
    assert len(scheduler.handles) == 3
    assert len(scheduler.pending) == 1
    assert manager.token == _token(300)
    assert scheduler.pending[0].delay_seconds == pytest.approx(240.0)


@pytest.mark.asyncio
async def test_manual_refresh_replaces_pending_timer() -> None:
    scheduler = FakeScheduler()
    manager = _manager(_TokenSource(_token(100), _token(500)), EventBus(), scheduler)

    await manager.start()
    await manager.refresh()

    assert scheduler.handles[0].cancelled is True
    assert len(scheduler.pending) == 1
    assert scheduler.pending[0].delay_seconds == pytest.approx(400.0)


@pytest.mark.asyncio
async def test_failed_refresh_publishes_sender_error_and_stops() -> None:
    bus = EventBus()
    errors: list[ConnectorEvent] = []
    bus.subscribe(EventKind.SENDER_ERROR, errors.append)
    scheduler = FakeScheduler()
    source = _TokenSource(_token(100), TransportError("[get_app_jwt] 401 Unauthorized", 401))
    manager = _manager(source, bus, scheduler)

    await manager.start()
    await scheduler.fire_next()

    assert len(errors) == 1
    assert errors[0].payload.startswith("Unable to obtain AppJWT")
    assert scheduler.pending == []
    assert manager.has_pending_refresh is False
    assert manager.token == _token(100)


@pytest.mark.asyncio
async def test_start_failure_raises_auth_expired() -> None:
    bus = EventBus()
    ready: list[ConnectorEvent] = []
    bus.subscribe(EventKind.SENDER_READY, ready.append)
    scheduler = FakeScheduler()
    manager = _manager(_TokenSource(TransportError("down")), bus, scheduler)

    with pytest.raises(AuthExpiredError):
        await manager.start()

    assert ready == []
    assert scheduler.handles == []


@pytest.mark.asyncio
async def test_missing_access_token_is_auth_failure() -> None:
    class _Empty:
        async def __call__(self) -> dict[str, object]:
            return {}

    scheduler = FakeScheduler()
    manager = TokenManager(_Empty(), EventBus(), scheduler=scheduler, clock=lambda: NOW)

    with pytest.raises(AuthExpiredError, match="access_token"):
        await manager.refresh()
    assert scheduler.handles == []


@pytest.mark.asyncio
async def test_stop_cancels_pending_timer() -> None:
    scheduler = FakeScheduler()
    manager = _manager(_TokenSource(_token(100), _token(200)), EventBus(), scheduler)

    await manager.start()
    manager.stop()

    assert scheduler.pending == []
    assert manager.has_pending_refresh is False

    await manager.refresh()
    assert scheduler.pending == []

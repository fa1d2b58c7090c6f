"""Testes do scheduler asyncio."""

from __future__ import annotations

import asyncio

import pytest

from app.infra.auth import AsyncioScheduler


@pytest.mark.asyncio
async def test_callback_runs_after_delay() -> None:
    fired = asyncio.Event()

    async def _callback() -> None:
        fired.set()

    AsyncioScheduler().call_later(0.01, _callback)

    await asyncio.wait_for(fired.wait(), timeout=1.0)


@pytest.mark.asyncio
async def test_cancel_before_firing() -> None:
    calls: list[str] = []

    async def _callback() -> None:
        calls.append("fired")

    handle = AsyncioScheduler().call_later(0.01, _callback)
    handle.cancel()
    await asyncio.sleep(0.05)

    assert handle.cancelled is True
    assert calls == []


@pytest.mark.asyncio
async def test_negative_delay_fires_immediately() -> None:
    fired = asyncio.Event()

    async def _callback() -> None:
        fired.set()

    AsyncioScheduler().call_later(-5, _callback)

    await asyncio.wait_for(fired.wait(), timeout=1.0)

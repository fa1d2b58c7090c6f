"""Aplicação ASGI do listener e entrypoint standalone do conector.

Uso como SDK:
    connector = Connector(settings)
    connector.on_webhook("ExConversationChangeNotification", handler)
    async with connector:
        await connector.open_conversation("consumer-1", UserProfile(first_name="Ana"))

Uso standalone (variáveis LP_* no ambiente):
    lp-connector
"""

from __future__ import annotations

import asyncio
import signal
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from config.logging import get_logger

if TYPE_CHECKING:
    from app.coordinators.liveperson.connector import Connector
    from app.events import EventBus

logger = get_logger(__name__)


def create_app(event_bus: EventBus, connector: Connector | None = None) -> FastAPI:
    """Cria a aplicação FastAPI do listener.

    Args:
        event_bus: Barramento onde os eventos de webhook são publicados
        connector: Conector exposto no readiness (opcional)
    """
    fastapi_app = FastAPI(
        title="LivePerson consumer connector",
        description="Listener de webhooks da plataforma de mensageria",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.event_bus = event_bus
    fastapi_app.state.connector = connector
    fastapi_app.include_router(create_api_router())
    return fastapi_app


async def _run_forever() -> None:
    from app.bootstrap import validate_runtime_settings
    from app.coordinators.liveperson.connector import Connector

    validate_runtime_settings()
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    async with Connector() as connector:
        connector.on_any(
            lambda event: logger.info(
                "connector_event",
                extra={"event_kind": str(event.kind), "event_name": event.name},
            )
        )
        await stop_event.wait()


def main() -> None:
    """Entrypoint do conector standalone."""
    from app.bootstrap import initialize_app

    initialize_app()
    logger.info("connector_starting")
    asyncio.run(_run_forever())


if __name__ == "__main__":
    main()

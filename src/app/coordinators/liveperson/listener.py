"""Listener HTTP de webhooks, servido por uvicorn no event loop corrente.

O socket é aberto aqui, antes do uvicorn: porta ocupada vira
ListenerBindError em vez de encerrar o processo.
"""

from __future__ import annotations

import asyncio
import logging
import socket
from typing import TYPE_CHECKING

import uvicorn

from app.events import ConnectorEvent, EventKind
from utils.errors import ListenerBindError

if TYPE_CHECKING:
    from fastapi import FastAPI

    from app.events import EventBus

logger = logging.getLogger(__name__)

STARTUP_POLL_SECONDS = 0.05


class WebhookListener:
    """Serve a aplicação FastAPI de webhooks em `host:port`.

    Args:
        app: Aplicação com as rotas de webhook
        events: Barramento onde LISTENER_READY é publicado
        port: Porta de escuta (0 escolhe uma porta livre)
        host: Interface de escuta
        public_url: URL pública de um túnel externo, apenas reportada
    """

    def __init__(
        self,
        app: FastAPI,
        events: EventBus,
        *,
        port: int,
        host: str = "0.0.0.0",
        public_url: str = "",
    ) -> None:
        self._app = app
        self._events = events
        self._port = port
        self._host = host
        self._public_url = public_url
        self._server: uvicorn.Server | None = None
        self._socket: socket.socket | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def port(self) -> int:
        return self._port

    async def start(self) -> None:
        """Abre a porta, inicia o servidor e publica LISTENER_READY.

        Raises:
            ListenerBindError: Porta indisponível ou servidor encerrado antes
                de ficar pronto.
        """
        sock = self._bind()
        self._socket = sock
        self._port = sock.getsockname()[1]
        config = uvicorn.Config(
            self._app,
            host=self._host,
            port=self._port,
            log_config=None,
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        self._task = asyncio.create_task(self._serve(self._server, sock))

        while not self._server.started:
            if self._task.done():
                self._reset()
                raise ListenerBindError(
                    f"[listener] server exited before serving port {self._port}"
                )
            await asyncio.sleep(STARTUP_POLL_SECONDS)

        message = f"Listening on port {self._port}"
        logger.info(
            "listener_ready",
            extra={"port": self._port, "public_url": self._public_url or None},
        )
        await self._events.publish(
            ConnectorEvent.of(
                EventKind.LISTENER_READY,
                {"message": message, "port": self._port, "public_url": self._public_url or None},
            )
        )

    async def stop(self) -> None:
        """Sinaliza shutdown e aguarda o servidor terminar."""
        if self._server is None or self._task is None:
            return
        self._server.should_exit = True
        await self._task
        self._reset()
        logger.info("listener_stopped", extra={"port": self._port})

    def _bind(self) -> socket.socket:
        family = socket.AF_INET6 if ":" in self._host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self._host, self._port))
        except OSError as exc:
            sock.close()
            logger.error(
                "listener_bind_failed",
                extra={"host": self._host, "port": self._port, "error": str(exc)},
            )
            raise ListenerBindError(
                f"[listener] failed to bind {self._host}:{self._port}: {exc}"
            ) from exc
        sock.set_inheritable(True)
        return sock

    async def _serve(self, server: uvicorn.Server, sock: socket.socket) -> None:
        # uvicorn encerra com sys.exit quando o startup falha
        try:
            await server.serve(sockets=[sock])
        except SystemExit as exc:
            logger.error("listener_exited", extra={"port": self._port, "exit_code": exc.code})

    def _reset(self) -> None:
        if self._socket is not None:
            self._socket.close()
        self._socket = None
        self._server = None
        self._task = None

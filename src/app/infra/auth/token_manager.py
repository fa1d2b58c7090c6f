"""Ciclo de vida do JWT da aplicação.

Obtém o token no Sentinel, decodifica o `exp` do próprio JWT e agenda a
próxima renovação para 80% do tempo restante. Existe no máximo um timer
pendente; o próximo só é agendado após a renovação terminar. Uma
renovação que falha não agenda outra.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from jose import JWTError, jwt

from app.events import ConnectorEvent, EventKind
from app.infra.auth.scheduler import AsyncioScheduler
from utils.errors import AuthExpiredError, ConnectorError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.events import EventBus
    from app.protocols.scheduler import ScheduledHandle, SchedulerProtocol

    TokenFetcher = Callable[[], Awaitable[dict[str, object]]]

logger = logging.getLogger(__name__)

REFRESH_FACTOR = 0.8


def decode_expiry(token: str) -> float:
    """Retorna o claim `exp` (epoch, segundos) sem validar assinatura.

    Raises:
        AuthExpiredError: Token mal-formado ou sem `exp`.
    """
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError as exc:
        raise AuthExpiredError(f"[decode_expiry] malformed app token: {exc}") from exc
    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        raise AuthExpiredError("[decode_expiry] app token has no exp claim")
    return float(exp)


def compute_refresh_delay(expires_at: float, now: float) -> float:
    """Segundos até a próxima renovação: 0.8 × (exp − now), mínimo 0."""
    return max((expires_at - now) * REFRESH_FACTOR, 0.0)


class TokenManager:
    """Mantém o JWT atual da aplicação e sua renovação periódica.

    Args:
        fetch_token: Coroutine que chama o endpoint de token e devolve o body
        events: Barramento onde sucesso/falha são publicados
        scheduler: Agendador de timers (injetável em testes)
        clock: Relógio em epoch seconds (injetável em testes)
    """

    def __init__(
        self,
        fetch_token: TokenFetcher,
        events: EventBus,
        *,
        scheduler: SchedulerProtocol | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._fetch_token = fetch_token
        self._events = events
        self._scheduler = scheduler or AsyncioScheduler()
        self._clock = clock
        self._token: str | None = None
        self._expires_at: float | None = None
        self._timer: ScheduledHandle | None = None
        self._stopped = False

    @property
    def token(self) -> str | None:
        """JWT atual (None antes da primeira renovação)."""
        return self._token

    @property
    def expires_at(self) -> float | None:
        return self._expires_at

    @property
    def has_pending_refresh(self) -> bool:
        return self._timer is not None

    async def refresh(self) -> str:
        """Obtém um novo token, substitui o atual e reagenda a renovação.

        Raises:
            AuthExpiredError: Falha ao obter ou decodificar o token.
        """
        try:
            body = await self._fetch_token()
            access_token = body.get("access_token")
            if not isinstance(access_token, str) or not access_token:
                raise AuthExpiredError("[refresh] access_token missing from response")
            expires_at = decode_expiry(access_token)
        except AuthExpiredError as exc:
            await self._report_failure(exc)
            raise
        except (ConnectorError, ValueError) as exc:
            error = AuthExpiredError(f"[refresh] {exc}")
            await self._report_failure(error)
            raise error from exc

        self._token = access_token
        self._expires_at = expires_at
        self._cancel_timer()

        if not self._stopped:
            delay = compute_refresh_delay(expires_at, self._clock())
            self._timer = self._scheduler.call_later(delay, self._scheduled_refresh)
            logger.info("app_token_refreshed", extra={"next_refresh_seconds": round(delay, 3)})
        await self._events.publish(
            ConnectorEvent.of(EventKind.TOKEN_REFRESHED, {"expires_at": expires_at})
        )
        return access_token

    async def start(self) -> None:
        """Primeira renovação; publica SENDER_READY em caso de sucesso."""
        self._stopped = False
        await self.refresh()
        await self._events.publish(ConnectorEvent.of(EventKind.SENDER_READY))

    def stop(self) -> None:
        """Cancela a renovação pendente."""
        self._stopped = True
        self._cancel_timer()

    async def _scheduled_refresh(self) -> None:
        self._timer = None
        logger.info("app_token_renewing")
        try:
            await self.refresh()
        except AuthExpiredError:
            # Já publicado como SENDER_ERROR; o ciclo de renovação termina aqui.
            logger.warning("app_token_refresh_loop_stopped")

    async def _report_failure(self, error: AuthExpiredError) -> None:
        logger.error("app_token_refresh_failed", extra={"error": str(error)})
        await self._events.publish(
            ConnectorEvent.of(EventKind.SENDER_ERROR, f"Unable to obtain AppJWT: {error}")
        )

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

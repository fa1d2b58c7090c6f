"""Autenticação da aplicação: JWT rotativo e agendamento da renovação."""

from app.infra.auth.scheduler import AsyncioScheduler, AsyncioTimerHandle
from app.infra.auth.token_manager import (
    REFRESH_FACTOR,
    TokenManager,
    compute_refresh_delay,
    decode_expiry,
)

__all__ = [
    "REFRESH_FACTOR",
    "AsyncioScheduler",
    "AsyncioTimerHandle",
    "TokenManager",
    "compute_refresh_delay",
    "decode_expiry",
]

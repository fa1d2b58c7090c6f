"""Filters aplicados ao handler do root logger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "***"

# Chaves de `extra` que podem carregar JWT, JWS ou credenciais
DEFAULT_SENSITIVE_FIELDS = frozenset({
    "access_token",
    "app_jwt",
    "authorization",
    "client_secret",
    "jws",
    "oauth_consumer_secret",
    "oauth_token_secret",
    "secret",
    "token",
})


class CorrelationIdFilter(logging.Filter):
    """Anexa `service` e `correlation_id` ao record.

    Um correlation_id já presente no record (via `extra`) tem precedência
    sobre o valor do getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Mascara atributos de credencial passados em `extra`.

    Args:
        fields: Nomes de atributo a mascarar
    """

    def __init__(self, fields: Iterable[str] = DEFAULT_SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields.intersection(record.__dict__):
            if record.__dict__[name]:
                record.__dict__[name] = REDACTED
        return True

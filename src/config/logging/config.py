"""Instalação do handler de log do conector.

Um único StreamHandler no root logger, com correlation_id, service e
mascaramento de credenciais. JSON por padrão; texto para uso local.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

LogFormat = Literal["json", "text"]

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "lp_consumer_connector"

# Loggers de terceiros que poluem o nível DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    log_format: LogFormat = "json",
) -> None:
    """Configura o root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem diferenciar caixa)
        service_name: Valor do campo `service`
        correlation_id_getter: Fornece o correlation_id do contexto atual
        log_format: "json" ou "text"

    Raises:
        ValueError: Nível ou formato inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    if log_format not in ("json", "text"):
        raise ValueError(f"Formato de log inválido: {log_format}")

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())
    handler.setFormatter(
        create_json_formatter() if log_format == "json" else create_text_formatter()
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, root.level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

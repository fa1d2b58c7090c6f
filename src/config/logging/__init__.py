"""Logging estruturado do conector.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="lp_consumer_connector")
    logger = get_logger(__name__)
    logger.info("conversation_opened", extra={"conversation_id": "abc"})

Credenciais passadas em `extra` (token, jws, secret, ...) são mascaradas.
"""

from config.logging.config import LogFormat, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "LogFormat",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]

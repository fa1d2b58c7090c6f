"""Formatters de log: JSON (produção) e texto (desenvolvimento local)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Presentes em toda linha, na ordem de saída
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(correlation_id)s] %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON; campos de `extra` entram como chaves de topo.

    Exemplo:
        {"asctime": "...", "level": "INFO", "logger": "app.infra.auth.token_manager",
         "message": "app_token_refreshed", "correlation_id": "",
         "service": "lp_consumer_connector", "next_refresh_seconds": 2880.0}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Formatter legível para terminal; descarta os campos de `extra`."""
    return logging.Formatter(TEXT_FORMAT)

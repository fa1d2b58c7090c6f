"""Bootstrap — inicialização de logging e validação de configuração.

Uso:
    from app.bootstrap import initialize_app

    initialize_app()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_liveperson_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura o root logger a partir de BaseSettings (nível, formato, service).

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        log_format=base.effective_log_format,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes em nível DEBUG."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Loga as capacidades degradadas por configuração ausente.

    Nunca falha o startup: a ausência de um subconjunto de configuração
    apenas desabilita a capacidade correspondente.

    Returns:
        Lista de avisos encontrados.
    """
    warnings = [f"base: {error}" for error in get_base_settings().validate()]
    warnings.extend(f"liveperson: {warning}" for warning in get_liveperson_settings().validate())

    if not warnings:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return warnings

    logger.warning(
        "settings_capabilities_degraded",
        extra={
            "component": "bootstrap",
            "result": "degraded",
            "warning_count": len(warnings),
            "warnings": warnings,
        },
    )
    return warnings

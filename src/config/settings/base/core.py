"""Settings de processo: ambiente, identificação e logging.

Variáveis: ENVIRONMENT, SERVICE_NAME, LOG_LEVEL, LOG_FORMAT, DEBUG.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Settings comuns ao processo do conector.

    Attributes:
        environment: development | staging | production
        service_name: Campo `service` dos logs
        log_level: Nível do root logger
        log_format: "json" (padrão) ou "text"
        debug: Modo debug
    """

    environment: Environment = "development"
    service_name: str = "lp-consumer-connector"
    log_level: str = "INFO"
    log_format: str = "json"
    debug: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def effective_log_format(self) -> Literal["json", "text"]:
        """Texto só fora de produção; produção sempre loga JSON."""
        if self.is_production:
            return "json"
        return "text" if self.log_format == "text" else "json"

    def validate(self) -> list[str]:
        """Retorna a lista de problemas encontrados (vazia = OK)."""
        errors: list[str] = []
        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_format not in ("json", "text"):
            errors.append(f"LOG_FORMAT inválido: {self.log_format}")
        return errors


def _parse_environment(raw: str) -> Environment:
    return _ENVIRONMENT_ALIASES.get(raw.lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "lp-consumer-connector"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("LOG_FORMAT", "json").lower(),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Instância cacheada, carregada do ambiente na primeira chamada."""
    return _load_base_from_env()

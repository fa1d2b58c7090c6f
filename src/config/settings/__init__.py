"""Agregador de settings do conector.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.liveperson import (
    DEFAULT_CSDS_DOMAIN,
    LivePersonSettings,
    get_liveperson_settings,
)

__all__ = [
    "DEFAULT_CSDS_DOMAIN",
    "BaseSettings",
    "Environment",
    "LivePersonSettings",
    "get_base_settings",
    "get_liveperson_settings",
]

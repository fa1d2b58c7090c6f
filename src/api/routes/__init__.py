"""Rotas HTTP do listener.

Estrutura:
- routes/liveperson/: webhook POST /event/{event_type}
- routes/health/: health e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

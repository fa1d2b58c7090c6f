"""Rotas da plataforma LivePerson."""

from api.routes.liveperson.webhook import router

__all__ = ["router"]

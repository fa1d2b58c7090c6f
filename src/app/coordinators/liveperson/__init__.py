"""Coordenação do conector LivePerson: ciclo de vida, conversas e listener."""

from app.coordinators.liveperson.connector import Connector
from app.coordinators.liveperson.listener import WebhookListener

__all__ = [
    "Connector",
    "WebhookListener",
]

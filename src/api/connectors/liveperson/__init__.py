"""Conector LivePerson - adapter de borda para as APIs de Messaging.

Este módulo é o único ponto de IO com a plataforma:
- Diretório de domínios (CSDS)
- Tokens de aplicação (Sentinel) e do consumidor (IDP)
- Send API (criação de conversa, envio de eventos, upload)
- Messaging History (busca OAuth1)
- Configuração da conta (nickname de agente)
- Webhook (parsing e extração de `changes`)
"""

from .account_config import get_agent_nickname
from .domains import resolve_domains
from .history import search_consumer_conversations
from .identity import get_app_jwt, get_consumer_jws
from .send_api import SendApiClient
from .ums_errors import extract_existing_user_id, find_response_for

__all__ = [
    "SendApiClient",
    "extract_existing_user_id",
    "find_response_for",
    "get_agent_nickname",
    "get_app_jwt",
    "get_consumer_jws",
    "resolve_domains",
    "search_consumer_conversations",
]

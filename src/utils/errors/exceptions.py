"""Exceções de domínio do conector LivePerson.

Cada condição de falha tem um tipo próprio; a mensagem é legível e
prefixada pela operação que falhou.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.sessions.models import Conversation


class ConnectorError(RuntimeError):
    """Base para todas as falhas do conector."""


class ConfigurationMissingError(ConnectorError):
    """Configuração ausente: desabilita uma capacidade, não o conector."""


class TransportError(ConnectorError):
    """Falha de rede ou resposta HTTP não-2xx (nunca retentada)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResolutionError(ConnectorError):
    """Resposta não-2xx ou mal-formada de um endpoint de dependência."""


class AuthExpiredError(ConnectorError):
    """Falha ao renovar o token da aplicação."""


class ListenerBindError(ConnectorError):
    """O listener de webhooks não conseguiu abrir a porta configurada."""


class ConversationError(ConnectorError):
    """Base para falhas de conversa."""


class DuplicateConversationError(ConversationError):
    """O consumidor já tem conversa aberta.

    Não é um erro real: carrega a Conversation parcial com o user_id
    extraído, usada por open_conversation para retomar a conversa.
    """

    def __init__(self, conversation: Conversation) -> None:
        super().__init__(
            f"[start_conversation] user {conversation.user_id} already has an open conversation"
        )
        self.conversation = conversation

    @property
    def user_id(self) -> str | None:
        return self.conversation.user_id


class ConversationFailedError(ConversationError):
    """Falha genérica ao criar ou localizar conversa."""


class ConversationNotFoundError(ConversationError):
    """conversation_id não registrado neste conector."""

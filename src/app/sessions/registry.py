"""Registro em memória das conversas do conector.

Busca linear, sem remoção nem expiração. Acessado apenas a partir do
event loop do conector, por isso dispensa lock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from app.sessions.models import Conversation


class ConversationRegistry:
    """Coleção de conversas pertencente a uma instância de Connector."""

    def __init__(self) -> None:
        self._conversations: list[Conversation] = []

    def append(self, conversation: Conversation) -> None:
        self._conversations.append(conversation)

    def find_by_conversation_id(self, conversation_id: str) -> Conversation | None:
        """Retorna a primeira conversa com o ID ou None."""
        for conversation in self._conversations:
            if conversation.conversation_id == conversation_id:
                return conversation
        return None

    def __len__(self) -> int:
        return len(self._conversations)

    def __iter__(self) -> Iterator[Conversation]:
        return iter(self._conversations)

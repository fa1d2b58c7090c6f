"""Modelo de conversa do consumidor.

Estados e transições são explícitos:

    CREATED → AWAITING_CREATION_RESPONSE → OPEN | DUPLICATE_DETECTED
    DUPLICATE_DETECTED → OPEN   (conversa existente recuperada do histórico)
    OPEN → CLOSED
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.payload_builders.liveperson import UserProfile


class ConversationState(StrEnum):
    """Estados de uma conversa no conector."""

    CREATED = "CREATED"
    AWAITING_CREATION_RESPONSE = "AWAITING_CREATION_RESPONSE"
    OPEN = "OPEN"
    DUPLICATE_DETECTED = "DUPLICATE_DETECTED"
    CLOSED = "CLOSED"

    def __str__(self) -> str:
        return self.value


VALID_TRANSITIONS: dict[ConversationState, frozenset[ConversationState]] = {
    ConversationState.CREATED: frozenset({ConversationState.AWAITING_CREATION_RESPONSE}),
    ConversationState.AWAITING_CREATION_RESPONSE: frozenset({
        ConversationState.OPEN,
        ConversationState.DUPLICATE_DETECTED,
    }),
    ConversationState.DUPLICATE_DETECTED: frozenset({ConversationState.OPEN}),
    ConversationState.OPEN: frozenset({ConversationState.CLOSED}),
    ConversationState.CLOSED: frozenset(),
}


@dataclass(eq=False, slots=True)
class Conversation:
    """Sessão de chat de um consumidor.

    `external_consumer_id` é fixado na construção. `conversation_id` só é
    atribuído após a criação bem-sucedida (ou recuperação do histórico).

    Attributes:
        external_consumer_id: Chave de correlação fornecida pelo chamador
        user_profile: Perfil de exibição do consumidor
        user_id: ID interno da plataforma (extraído do erro de duplicidade)
        jws: Resposta do IDP com o token do consumidor (`token`)
        conversation_id: ID atribuído pela plataforma
        state: Estado atual
    """

    external_consumer_id: str
    user_profile: UserProfile | None = None
    user_id: str | None = None
    jws: dict[str, Any] | None = None
    conversation_id: str | None = None
    state: ConversationState = field(default=ConversationState.CREATED)

    @property
    def session_token(self) -> str | None:
        """Token JWS usado no header X-LP-ON-BEHALF."""
        if not self.jws:
            return None
        return self.jws.get("token")

    def transition_to(self, target: ConversationState) -> None:
        """Move a conversa para `target`.

        Raises:
            ValueError: Se a transição não é permitida.
        """
        if target not in VALID_TRANSITIONS[self.state]:
            raise ValueError(f"Transição inválida de conversa: {self.state} -> {target}")
        self.state = target

    def mark_open(self, conversation_id: str) -> None:
        """Registra o conversation_id e move para OPEN."""
        self.transition_to(ConversationState.OPEN)
        self.conversation_id = conversation_id

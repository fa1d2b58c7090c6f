"""Conversas do conector: modelo, estados e registro em memória."""

from app.sessions.models import VALID_TRANSITIONS, Conversation, ConversationState
from app.sessions.registry import ConversationRegistry

__all__ = [
    "VALID_TRANSITIONS",
    "Conversation",
    "ConversationRegistry",
    "ConversationState",
]

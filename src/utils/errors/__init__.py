"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthExpiredError,
    ConfigurationMissingError,
    ConnectorError,
    ConversationError,
    ConversationFailedError,
    ConversationNotFoundError,
    DuplicateConversationError,
    ListenerBindError,
    ResolutionError,
    TransportError,
)

__all__ = [
    "AuthExpiredError",
    "ConfigurationMissingError",
    "ConnectorError",
    "ConversationError",
    "ConversationFailedError",
    "ConversationNotFoundError",
    "DuplicateConversationError",
    "ListenerBindError",
    "ResolutionError",
    "TransportError",
]

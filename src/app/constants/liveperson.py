"""Enums e constantes do protocolo UMS/LivePerson Messaging."""

from __future__ import annotations

from enum import StrEnum


class UmsRequestType(StrEnum):
    """Tipos de requisição UMS suportados."""

    REQUEST_CONVERSATION = "cm.ConsumerRequestConversation"
    UPDATE_CONVERSATION_FIELD = "cm.UpdateConversationField"
    SET_USER_PROFILE = "userprofile.SetUserProfile"
    PUBLISH_EVENT = "ms.PublishEvent"
    GENERATE_UPLOAD_URL = "ms.GenerateURLForUploadFile"


class ChatState(StrEnum):
    """Estados de chat do consumidor (ChatStateEvent)."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    GONE = "GONE"
    COMPOSING = "COMPOSING"
    PAUSE = "PAUSE"


class AcceptStatus(StrEnum):
    """Status de recebimento de mensagens (AcceptStatusEvent)."""

    ACCEPT = "ACCEPT"
    READ = "READ"


class ConversationStatus(StrEnum):
    """Status usados na busca do Messaging History."""

    OPEN = "OPEN"
    CLOSE = "CLOSE"


class HostedFileType(StrEnum):
    """Tipos de arquivo aceitos no upload hospedado."""

    PNG = "PNG"
    JPG = "JPG"
    GIF = "GIF"


# Código de resposta UMS que acompanha "User <id> already has ..."
BAD_REQUEST_CODE = "BAD_REQUEST"

# Versões de API
UMS_API_VERSION = "3"
SENTINEL_API_VERSION = "1.0"
IDP_API_VERSION = "1.0"
CSDS_API_VERSION = "1.0"

# Nomes de serviço no diretório CSDS
SERVICE_SENTINEL = "sentinel"
SERVICE_IDP = "idp"
SERVICE_ASYNC_MESSAGING = "asyncMessagingEnt"
SERVICE_MESSAGING_HISTORY = "msgHist"
SERVICE_ACCOUNT_CONFIG_CDN = "acCdnDomain"
SERVICE_SWIFT = "swiftDomain"

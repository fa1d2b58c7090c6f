"""Builders de requisições UMS para a API LivePerson Messaging.

Cada builder devolve um UmsRequest; `to_dict()` produz o JSON enviado.
"""

from api.payload_builders.liveperson.base import UmsRequest
from api.payload_builders.liveperson.conversation import (
    build_end_conversation_event,
    build_request_conversation_event,
)
from api.payload_builders.liveperson.files import build_request_upload_url_event
from api.payload_builders.liveperson.profile import (
    UserPrivateData,
    UserProfile,
    build_set_user_profile_event,
)
from api.payload_builders.liveperson.publish import (
    build_publish_accept_status_event,
    build_publish_chat_state_event,
    build_publish_event,
    build_publish_image_thumbnail_event,
    build_publish_text_event,
)

__all__ = [
    "UmsRequest",
    "UserPrivateData",
    "UserProfile",
    "build_end_conversation_event",
    "build_publish_accept_status_event",
    "build_publish_chat_state_event",
    "build_publish_event",
    "build_publish_image_thumbnail_event",
    "build_publish_text_event",
    "build_request_conversation_event",
    "build_request_upload_url_event",
    "build_set_user_profile_event",
]

"""Builders de eventos publicados na conversa (ms.PublishEvent)."""

from __future__ import annotations

from typing import Any

from api.payload_builders.liveperson.base import UmsRequest
from app.constants.liveperson import AcceptStatus, ChatState, UmsRequestType


def build_publish_event(dialog_id: str | None, event: dict[str, Any]) -> UmsRequest:
    """Envelope genérico de publicação; `dialogId` só entra se informado."""
    body: dict[str, Any] = {"event": event}
    if dialog_id:
        body["dialogId"] = dialog_id
    return UmsRequest(type=UmsRequestType.PUBLISH_EVENT, body=body)


def build_publish_text_event(dialog_id: str, text: str) -> UmsRequest:
    return build_publish_event(
        dialog_id,
        {
            "type": "ContentEvent",
            "contentType": "text/plain",
            "message": text,
        },
    )


def build_publish_chat_state_event(dialog_id: str, state: ChatState | str) -> UmsRequest:
    """Constrói ChatStateEvent.

    Raises:
        ValueError: Se `state` não é um ChatState conhecido.
    """
    return build_publish_event(
        dialog_id,
        {
            "type": "ChatStateEvent",
            "chatState": str(ChatState(state)),
        },
    )


def build_publish_accept_status_event(
    dialog_id: str,
    sequence_list: list[int],
    status: AcceptStatus | str = AcceptStatus.ACCEPT,
) -> UmsRequest:
    return build_publish_event(
        dialog_id,
        {
            "type": "AcceptStatusEvent",
            "status": str(AcceptStatus(status)),
            "sequenceList": list(sequence_list),
        },
    )


def build_publish_image_thumbnail_event(
    dialog_id: str,
    file_upload_params: dict[str, Any],
    file_type: str,
    encoded_image: str,
    caption: str | None = None,
) -> UmsRequest:
    """Constrói ContentEvent `hosted/file` apontando para o arquivo enviado.

    Args:
        dialog_id: conversationId de destino
        file_upload_params: Body da resposta a GenerateURLForUploadFile
        file_type: png, jpg ou gif
        encoded_image: Thumbnail já codificado em base64
        caption: Legenda opcional
    """
    return build_publish_event(
        dialog_id,
        {
            "type": "ContentEvent",
            "contentType": "hosted/file",
            "message": {
                "caption": caption,
                "relativePath": file_upload_params["relativePath"],
                "fileType": file_type.upper(),
                "preview": f"data:image/{file_type.lower()};base64,{encoded_image}",
            },
        },
    )

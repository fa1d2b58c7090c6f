"""Builders de eventos de conversa (cm.*)."""

from __future__ import annotations

from typing import Any

from api.payload_builders.liveperson.base import UmsRequest
from app.constants.liveperson import UmsRequestType


def build_request_conversation_event(
    account_id: str,
    skill_id: str | None = None,
    campaign_info: dict[str, str] | None = None,
) -> UmsRequest:
    """Constrói o evento "Request Conversation".

    Args:
        account_id: brandId da conta
        skill_id: Skill para roteamento (opcional)
        campaign_info: `{"campaignId", "engagementId"}` para roteamento por campanha
    """
    body: dict[str, Any] = {
        "ttrDefName": "CUSTOM",
        "channelType": "MESSAGING",
        "brandId": account_id,
    }
    if skill_id:
        body["skillId"] = skill_id
    if campaign_info:
        body["campaignInfo"] = campaign_info
    return UmsRequest(type=UmsRequestType.REQUEST_CONVERSATION, body=body)


def build_end_conversation_event(conversation_id: str) -> UmsRequest:
    """Constrói o evento que fecha a conversa."""
    return UmsRequest(
        type=UmsRequestType.UPDATE_CONVERSATION_FIELD,
        body={
            "conversationId": conversation_id,
            "conversationField": {
                "field": "ConversationStateField",
                "conversationState": "CLOSE",
            },
        },
    )

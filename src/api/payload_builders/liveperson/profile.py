"""Objetos de perfil do consumidor e o evento SetUserProfile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from api.payload_builders.liveperson.base import UmsRequest
from app.constants.liveperson import UmsRequestType


@dataclass(frozen=True, slots=True)
class UserPrivateData:
    """Dados privados do consumidor (não exibidos ao agente)."""

    mobile_num: str | None = None
    mail: str | None = None
    push_notification_data: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.mobile_num:
            data["mobileNum"] = self.mobile_num
        if self.mail:
            data["mail"] = self.mail
        if self.push_notification_data:
            data["pushNotificationData"] = self.push_notification_data
        return data


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Perfil de exibição do consumidor.

    Apenas os campos informados são serializados. `authenticated_sdes`
    vai para `authenticatedData.lp_sdes`.
    """

    first_name: str | None = None
    last_name: str | None = None
    user_id: str | None = None
    avatar_url: str | None = None
    role: str | None = None
    backgnd_img_uri: str | None = None
    description: str | None = None
    user_private_data: UserPrivateData | None = None
    authenticated_sdes: list[dict[str, Any]] | None = None

    def to_dict(self) -> dict[str, Any]:
        fields = {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "userId": self.user_id,
            "avatarUrl": self.avatar_url,
            "role": self.role,
            "backgndImgUri": self.backgnd_img_uri,
            "description": self.description,
        }
        data: dict[str, Any] = {key: value for key, value in fields.items() if value}
        if self.user_private_data:
            data["userPrivateData"] = self.user_private_data.to_dict()
        if self.authenticated_sdes:
            data["authenticatedData"] = {"lp_sdes": list(self.authenticated_sdes)}
        return data


def build_set_user_profile_event(profile: UserProfile | None) -> UmsRequest:
    body = profile.to_dict() if profile else {}
    return UmsRequest(type=UmsRequestType.SET_USER_PROFILE, body=body)

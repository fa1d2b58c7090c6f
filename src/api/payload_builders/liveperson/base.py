"""Envelope genérico de requisição UMS."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class UmsRequest:
    """Requisição UMS no formato `{kind, id, type, body}`.

    Cada instância recebe um `id` uuid4 próprio, usado para casar a
    requisição com o `reqId` da resposta.
    """

    type: str
    body: dict[str, Any]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    kind: str = "req"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "id": self.id,
            "type": self.type,
            "body": self.body,
        }

"""Webhook LivePerson: parsing seguro e fan-out de `changes`."""

from .receive import (
    InvalidJsonError,
    WebhookRequestError,
    extract_changes,
    parse_webhook_body,
)

__all__ = [
    "InvalidJsonError",
    "WebhookRequestError",
    "extract_changes",
    "parse_webhook_body",
]

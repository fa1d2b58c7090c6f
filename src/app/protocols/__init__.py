"""Protocolos e contratos do core da aplicação."""

from .scheduler import ScheduledHandle, SchedulerProtocol
from .send_api import SendApiProtocol

__all__ = [
    "ScheduledHandle",
    "SchedulerProtocol",
    "SendApiProtocol",
]

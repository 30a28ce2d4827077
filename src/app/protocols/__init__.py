"""Protocolos (contratos) dependidos pelos use cases.

Implementações concretas ficam em app/infra e são conectadas em
app/bootstrap.
"""

from .followup_client import FollowupClientProtocol
from .task_handler import TaskHandlerProtocol
from .task_publisher import TaskPublisherProtocol

__all__ = [
    "FollowupClientProtocol",
    "TaskHandlerProtocol",
    "TaskPublisherProtocol",
]

"""Domínio — contratos de interação, tasks e resultados."""

from app.domain.interaction import (
    DEFAULT_TASK_COMMAND,
    CommandOption,
    CompletionMessage,
    InboundInteraction,
    InteractionResponseType,
    InteractionType,
    QueuedTask,
)
from app.domain.results import InteractionResponse, PublishResult, TaskAck

__all__ = [
    "DEFAULT_TASK_COMMAND",
    "CommandOption",
    "CompletionMessage",
    "InboundInteraction",
    "InteractionResponse",
    "InteractionResponseType",
    "InteractionType",
    "PublishResult",
    "QueuedTask",
    "TaskAck",
]

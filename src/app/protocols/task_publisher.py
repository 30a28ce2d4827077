"""Protocolo de publicação de tasks diferidas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import QueuedTask


class TaskPublisherProtocol(Protocol):
    """Contrato mínimo para enfileirar uma task.

    Não faz retry. Falhas são sinalizadas com TaskPublishError e o
    chamador decide se suprime ou propaga.
    """

    async def publish(self, destination: str, task: QueuedTask) -> None: ...

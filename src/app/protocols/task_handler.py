"""Protocolo do consumidor de tasks entregues pela fila (modelo push).

Independente de transporte: a rota HTTP apenas traduz o TaskAck em
status de resposta para a fila.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import QueuedTask, TaskAck


class TaskHandlerProtocol(Protocol):
    """Processa uma task e devolve o ack para a fila."""

    async def handle(self, task: QueuedTask) -> TaskAck: ...

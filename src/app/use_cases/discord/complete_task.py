"""Worker de conclusão das tasks diferidas.

Recebe a task entregue pela fila, calcula o conteúdo final e edita a
resposta original da interação via follow-up. Não conhece HTTP: a rota do
worker apenas converte o TaskAck em status de resposta para a fila.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain import CompletionMessage, TaskAck
from app.use_cases.discord.commands import COMMAND_TABLE, get_command
from utils.errors import FollowupDeliveryError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain import QueuedTask
    from app.protocols import FollowupClientProtocol
    from app.use_cases.discord.commands import CommandSpec

logger = logging.getLogger(__name__)


class CompletionWorker:
    """Implementa TaskHandlerProtocol para o fluxo diferido.

    Args:
        followup_client: Cliente que edita a resposta original.
        redeliver_on_failure: Se True, falha na entrega pede redelivery à
            fila. Padrão False: a task é sempre confirmada.
        commands: Tabela de comandos (padrão: COMMAND_TABLE).
    """

    def __init__(
        self,
        followup_client: FollowupClientProtocol,
        redeliver_on_failure: bool = False,
        commands: Mapping[str, CommandSpec] = COMMAND_TABLE,
    ) -> None:
        self._followup_client = followup_client
        self._redeliver_on_failure = redeliver_on_failure
        self._commands = commands

    async def handle(self, task: QueuedTask) -> TaskAck:
        spec = get_command(task.command_name, self._commands)
        if spec is None:
            # Reentregar não resolve: confirma e descarta
            logger.warning("completion_unknown_command", extra={"command": task.command_name})
            return TaskAck(delivered=False, error_type="unknown_command")

        message = CompletionMessage(content=spec.render(task.arguments))
        try:
            await self._followup_client.edit_original(task.completion_token, message)
        except Exception as exc:
            # Erros fora de FollowupDeliveryError seguem a mesma política de ack;
            # a mensagem deles pode conter a URL com o token e não é logada
            logger.error(
                "completion_delivery_failed",
                extra={
                    "command": task.command_name,
                    "error_type": type(exc).__name__,
                    "error": str(exc) if isinstance(exc, FollowupDeliveryError) else None,
                    "redeliver": self._redeliver_on_failure,
                },
            )
            return TaskAck(
                delivered=False,
                redeliver=self._redeliver_on_failure,
                error_type=type(exc).__name__,
            )

        logger.info("completion_delivered", extra={"command": task.command_name})
        return TaskAck(delivered=True)

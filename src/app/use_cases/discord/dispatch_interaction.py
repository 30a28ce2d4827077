"""Dispatcher de interações Discord.

Máquina de estados sobre o tipo da interação, executada apenas após a
validação de assinatura:

- PING: responde PONG, sem efeitos colaterais.
- APPLICATION_COMMAND diferido: publica QueuedTask (best-effort) e
  responde DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE mesmo se o publish falhar.
- APPLICATION_COMMAND desconhecido/não diferido: responde inline.
- Qualquer outro tipo: 405.

O trabalho síncrono se limita a roteamento + publish com timeout; o
cálculo do resultado acontece no worker.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain import (
    InteractionResponse,
    InteractionResponseType,
    InteractionType,
    QueuedTask,
)
from app.infra.queue import publish_best_effort
from app.use_cases.discord.commands import COMMAND_TABLE, DEFAULT_IMMEDIATE_CONTENT, get_command

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain import InboundInteraction
    from app.protocols import TaskPublisherProtocol
    from app.use_cases.discord.commands import CommandSpec

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = InteractionResponse(status_code=405, body={})


class InteractionDispatcher:
    """Roteia interações verificadas e monta a resposta imediata."""

    def __init__(
        self,
        publisher: TaskPublisherProtocol,
        queue_destination: str,
        publish_timeout_seconds: float = 2.0,
        commands: Mapping[str, CommandSpec] = COMMAND_TABLE,
    ) -> None:
        self._publisher = publisher
        self._queue_destination = queue_destination
        self._publish_timeout_seconds = publish_timeout_seconds
        self._commands = commands

    async def dispatch(self, interaction: InboundInteraction) -> InteractionResponse:
        interaction_type = interaction.interaction_type

        if interaction_type is InteractionType.PING:
            logger.info("interaction_ping_received")
            return _respond({"type": InteractionResponseType.PONG.value})

        if interaction_type is InteractionType.APPLICATION_COMMAND:
            return await self._dispatch_command(interaction)

        logger.warning("interaction_type_unsupported", extra={"interaction_type": interaction.type})
        return METHOD_NOT_ALLOWED

    async def _dispatch_command(self, interaction: InboundInteraction) -> InteractionResponse:
        spec = get_command(interaction.command_name, self._commands)
        if spec is None or not spec.deferred:
            logger.info(
                "command_answered_inline",
                extra={"command": interaction.command_name, "known": spec is not None},
            )
            return _respond(
                {
                    "type": InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE.value,
                    "data": {"content": DEFAULT_IMMEDIATE_CONTENT},
                }
            )

        try:
            task = QueuedTask(
                completion_token=interaction.completion_token,
                command_name=spec.name,
                arguments=_extract_arguments(spec, interaction),
            )
        except ValidationError:
            # Sem token não há follow-up possível; o ack diferido ainda é devido
            logger.warning("command_task_invalid", extra={"command": spec.name})
            return _respond({"type": InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE.value})

        result = await publish_best_effort(
            self._publisher,
            self._queue_destination,
            task,
            self._publish_timeout_seconds,
        )
        logger.info(
            "command_deferred",
            extra={
                "command": spec.name,
                "publish_success": result.success,
                "publish_error_type": result.error_type,
            },
        )
        return _respond({"type": InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE.value})


def _extract_arguments(spec: CommandSpec, interaction: InboundInteraction) -> dict[str, Any]:
    if not spec.argument_name:
        return {}
    value = interaction.first_option_value()
    return {spec.argument_name: "" if value is None else value}


def _respond(body: dict[str, Any]) -> InteractionResponse:
    return InteractionResponse(status_code=200, body=body)

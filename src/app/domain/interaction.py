"""Modelos de domínio das interações Discord e das tasks diferidas.

Contratos imutáveis compartilhados entre borda HTTP, dispatcher,
publisher e worker. O completion token atravessa todos sem alteração.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Comando assumido quando o payload da fila vem no formato legado (sem "command")
DEFAULT_TASK_COMMAND = "hello"


class InteractionType(IntEnum):
    """Tipos de interação tratados pelo dispatcher."""

    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    """Tipos de resposta aceitos pelo Discord."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5


class CommandOption(BaseModel):
    """Opção de comando (ordem preservada do payload)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    value: Any = None


class InboundInteraction(BaseModel):
    """Interação recebida do Discord, já com assinatura validada.

    `type` guarda o valor bruto: tipos fora de InteractionType são
    respondidos com 405 pelo dispatcher.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: int
    command_name: str = ""
    options: tuple[CommandOption, ...] = ()
    completion_token: str = ""
    raw_body: bytes = Field(default=b"", repr=False)
    signature: str = Field(default="", repr=False)
    timestamp: str = ""

    @property
    def interaction_type(self) -> InteractionType | None:
        try:
            return InteractionType(self.type)
        except ValueError:
            return None

    def first_option_value(self) -> Any:
        """Valor da primeira opção, ou None se o comando veio sem opções."""
        if not self.options:
            return None
        return self.options[0].value


class QueuedTask(BaseModel):
    """Unidade de trabalho publicada na fila e consumida pelo worker.

    Formato de transporte (compatível com o payload original):
        {"discord_message_token": <token>, "name": <arg>, "command": <nome>}
    """

    model_config = ConfigDict(frozen=True)

    completion_token: str = Field(..., min_length=1)
    command_name: str = Field(..., min_length=1)
    arguments: Mapping[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="after")
    @classmethod
    def _freeze_arguments(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o JSON enviado à fila."""
        payload: dict[str, Any] = {"discord_message_token": self.completion_token}
        payload.update(self.arguments)
        payload["command"] = self.command_name
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> QueuedTask:
        """Reconstrói a task a partir do body entregue pela fila.

        Raises:
            ValueError: Se o token estiver ausente ou o payload for inválido.
        """
        data = dict(payload)
        token = data.pop("discord_message_token", None)
        command = data.pop("command", None) or DEFAULT_TASK_COMMAND
        if not isinstance(token, str) or not token:
            raise ValueError("discord_message_token ausente")
        try:
            return cls(completion_token=token, command_name=command, arguments=data)
        except ValidationError as exc:
            raise ValueError("task_payload_invalid") from exc


class CompletionMessage(BaseModel):
    """Conteúdo final entregue ao Discord via follow-up."""

    model_config = ConfigDict(frozen=True)

    content: str

    def to_payload(self) -> dict[str, str]:
        return {"content": self.content}


__all__ = [
    "DEFAULT_TASK_COMMAND",
    "CommandOption",
    "CompletionMessage",
    "InboundInteraction",
    "InteractionResponseType",
    "InteractionType",
    "QueuedTask",
]

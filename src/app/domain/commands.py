"""Definições de application commands registradas na API do Discord."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class ApplicationCommandOptionType(IntEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class DiscordCommandOption(BaseModel):
    """Opção declarada de um slash command."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=32)
    description: str = Field(..., min_length=1, max_length=100)
    type: ApplicationCommandOptionType = ApplicationCommandOptionType.STRING
    required: bool = False


class DiscordBotCommand(BaseModel):
    """Slash command como aceito/retornado por /applications/{id}/commands."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=32)
    description: str = Field(..., min_length=1, max_length=100)
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    options: list[DiscordCommandOption] = Field(default_factory=list)

    def to_registration_payload(self) -> dict[str, object]:
        """Payload de registro (sem `id`, que é atribuído pelo Discord)."""
        return self.model_dump(mode="json", exclude={"id"})


__all__ = [
    "ApplicationCommandOptionType",
    "ApplicationCommandType",
    "DiscordBotCommand",
    "DiscordCommandOption",
]

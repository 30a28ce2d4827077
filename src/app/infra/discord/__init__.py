"""Adapters HTTP da API do Discord."""

from .commands_client import DiscordCommandsClient, create_commands_client
from .followup_client import DiscordFollowupClient, create_followup_client

__all__ = [
    "DiscordCommandsClient",
    "DiscordFollowupClient",
    "create_commands_client",
    "create_followup_client",
]

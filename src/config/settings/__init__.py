"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.discord import (
    DISCORD_API_BASE_URL,
    DISCORD_API_VERSION,
    DiscordSettings,
    get_discord_settings,
)

# Infrastructure settings
from config.settings.infra import (
    QueueSettings,
    get_queue_settings,
)

__all__ = [
    # Constants
    "DISCORD_API_BASE_URL",
    "DISCORD_API_VERSION",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    # Infrastructure
    "QueueSettings",
    "get_base_settings",
    "get_discord_settings",
    "get_queue_settings",
]

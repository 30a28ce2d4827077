"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    DiscordApiError,
    FollowupDeliveryError,
    InfrastructureError,
    TaskPublishError,
)

__all__ = [
    "ConfigurationError",
    "DiscordApiError",
    "FollowupDeliveryError",
    "InfrastructureError",
    "TaskPublishError",
]

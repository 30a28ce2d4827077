"""Exceções compartilhadas: configuração fatal e falhas de infraestrutura."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Configuração inválida no startup (fatal, aborta o processo)."""


class InfrastructureError(RuntimeError):
    """Base para falhas em chamadas externas (fila, Discord)."""


class TaskPublishError(InfrastructureError):
    """Falha ao publicar task na fila (QStash)."""


class FollowupDeliveryError(InfrastructureError):
    """Falha ao editar a resposta original via webhook de follow-up."""


class DiscordApiError(InfrastructureError):
    """Falha em chamada REST de comandos da aplicação Discord."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

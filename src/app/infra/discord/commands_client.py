"""Cliente REST de application commands (ferramenta de operador).

Não participa do caminho de atendimento de requests: é usado apenas pelo
script scripts/manage_commands.py para listar, registrar e remover
comandos globais da aplicação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.commands import DiscordBotCommand
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import DiscordApiError

if TYPE_CHECKING:
    import httpx

    from config.settings import DiscordSettings

logger = logging.getLogger(__name__)


class DiscordCommandsClient:
    """Operações CRUD em /applications/{application_id}/commands."""

    def __init__(self, settings: DiscordSettings, http: HttpClient | None = None) -> None:
        if not settings.bot_token:
            raise ValueError(
                "bot_token é obrigatório para gerenciar comandos. "
                "Verifique se DISCORD_TOKEN está configurado."
            )
        self._settings = settings
        self._http = http or HttpClient()

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bot {self._settings.bot_token}",
        }

    async def list_commands(self) -> list[DiscordBotCommand]:
        """Lista os comandos registrados.

        Raises:
            DiscordApiError: Falha HTTP ou resposta fora do contrato.
        """
        try:
            response = await self._http.get(self._settings.commands_endpoint, headers=self._headers())
        except HttpError as exc:
            raise DiscordApiError("list_commands_failed", status_code=exc.status_code) from exc

        try:
            data = response.json()
            return [DiscordBotCommand.model_validate(item) for item in data]
        except (ValueError, TypeError, ValidationError) as exc:
            raise DiscordApiError("list_commands_invalid_response") from exc

    async def register_command(self, command: DiscordBotCommand) -> DiscordBotCommand:
        """Registra (ou sobrescreve, pelo nome) um comando global."""
        try:
            response = await self._http.post(
                self._settings.commands_endpoint,
                json=command.to_registration_payload(),
                headers=self._headers(),
            )
        except HttpError as exc:
            raise DiscordApiError("register_command_failed", status_code=exc.status_code) from exc

        logger.info(
            "command_registered",
            extra={"command": command.name, "status_code": response.status_code},
        )
        try:
            return DiscordBotCommand.model_validate(response.json())
        except (ValueError, ValidationError):
            return command

    async def unregister_command(self, command_id: str) -> None:
        """Remove um comando pelo ID (aspas ao redor são descartadas)."""
        clean_id = command_id.replace('"', "").strip()
        if not clean_id:
            raise ValueError("command_id é obrigatório")

        url = f"{self._settings.commands_endpoint}/{clean_id}"
        try:
            await self._http.delete(url, headers=self._headers())
        except HttpError as exc:
            raise DiscordApiError("unregister_command_failed", status_code=exc.status_code) from exc

        logger.info("command_unregistered", extra={"command_id": clean_id})


def create_commands_client(
    settings: DiscordSettings,
    http_client: httpx.AsyncClient | None = None,
) -> DiscordCommandsClient:
    """Factory com retries para chamadas de operador (não há limite de ack)."""
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        max_retries=settings.max_retries,
    )
    return DiscordCommandsClient(settings, HttpClient(config, http_client=http_client))

"""Cliente do webhook de follow-up do Discord.

Edita a resposta original (diferida) de uma interação. O token é de uso
único por interação e expira no Discord; não há retry aqui.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import FollowupDeliveryError

if TYPE_CHECKING:
    import httpx

    from app.domain import CompletionMessage
    from config.settings import DiscordSettings

logger = logging.getLogger(__name__)


class DiscordFollowupClient:
    """PATCH em /webhooks/{application_id}/{token}/messages/@original."""

    def __init__(self, settings: DiscordSettings, http: HttpClient | None = None) -> None:
        self._settings = settings
        self._http = http or HttpClient(HttpClientConfig(max_retries=0))

    async def edit_original(self, completion_token: str, message: CompletionMessage) -> None:
        """Entrega o conteúdo final da interação.

        Raises:
            FollowupDeliveryError: Se o Discord recusar ou a chamada falhar.
        """
        if not completion_token:
            raise FollowupDeliveryError("completion_token ausente")

        try:
            url = self._settings.followup_endpoint(completion_token)
        except ValueError as exc:
            raise FollowupDeliveryError("application_id_missing") from exc

        try:
            response = await self._http.patch(
                url,
                json=message.to_payload(),
                headers={"Content-Type": "application/json"},
            )
        except HttpError as exc:
            raise FollowupDeliveryError(
                f"followup_edit_failed:{exc.status_code or exc}"
            ) from exc

        logger.info("followup_edited", extra={"status_code": response.status_code})


def create_followup_client(
    settings: DiscordSettings,
    http_client: httpx.AsyncClient | None = None,
) -> DiscordFollowupClient:
    """Factory do cliente de follow-up (sem retries)."""
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        max_retries=0,
    )
    return DiscordFollowupClient(settings, HttpClient(config, http_client=http_client))

"""Publisher de tasks diferidas no QStash (relay HTTP autenticado).

O QStash persiste a mensagem e faz push at-least-once para o endpoint do
worker. Este publisher não faz retry: falhas sobem como TaskPublishError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.domain import PublishResult
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import TaskPublishError

if TYPE_CHECKING:
    import httpx

    from app.domain import QueuedTask
    from app.protocols import TaskPublisherProtocol
    from config.settings import QueueSettings

logger = logging.getLogger(__name__)


class QStashTaskPublisher:
    """Publica QueuedTask como JSON com Authorization Bearer."""

    def __init__(self, token: str, http: HttpClient | None = None) -> None:
        self._token = token
        self._http = http or HttpClient(HttpClientConfig(max_retries=0))

    async def publish(self, destination: str, task: QueuedTask) -> None:
        """Envia a task para a fila.

        Raises:
            TaskPublishError: status não-2xx, timeout ou erro de conexão.
        """
        if not self._token or not self._token.strip():
            raise TaskPublishError("qstash_token_missing")
        if not destination:
            raise TaskPublishError("queue_destination_missing")

        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }
        try:
            response = await self._http.post(destination, json=task.to_payload(), headers=headers)
        except HttpError as exc:
            raise TaskPublishError(f"queue_publish_failed:{exc}") from exc

        logger.info(
            "task_published",
            extra={"command": task.command_name, "status_code": response.status_code},
        )


async def publish_best_effort(
    publisher: TaskPublisherProtocol,
    destination: str,
    task: QueuedTask,
    timeout_seconds: float,
) -> PublishResult:
    """Publica sem propagar falhas, limitado pelo timeout do ack.

    Qualquer exceção do publisher, inclusive o timeout, deixa o comando
    órfão: o usuário fica com a resposta diferida e a falha fica visível
    apenas no log.
    """
    try:
        await asyncio.wait_for(publisher.publish(destination, task), timeout=timeout_seconds)
    except Exception as exc:
        logger.error(
            "task_publish_failed",
            extra={
                "command": task.command_name,
                "error_type": type(exc).__name__,
                "timeout_seconds": timeout_seconds,
            },
        )
        return PublishResult.failed(type(exc).__name__)
    return PublishResult.ok()


def create_qstash_publisher(
    settings: QueueSettings,
    http_client: httpx.AsyncClient | None = None,
) -> QStashTaskPublisher:
    """Factory do publisher com HTTP sem retries."""
    config = HttpClientConfig(
        timeout_seconds=settings.publish_timeout_seconds,
        max_retries=0,
    )
    return QStashTaskPublisher(
        token=settings.qstash_token,
        http=HttpClient(config, http_client=http_client),
    )

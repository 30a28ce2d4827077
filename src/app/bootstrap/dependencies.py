"""Factories das dependências do serviço.

Cria publisher, cliente de follow-up, dispatcher e worker a partir das
settings carregadas no startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.crypto import load_verification_key
from app.infra.discord import create_followup_client
from app.infra.queue import create_qstash_publisher
from app.use_cases.discord import CompletionWorker, InteractionDispatcher

if TYPE_CHECKING:
    import httpx
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

    from app.protocols import TaskHandlerProtocol, TaskPublisherProtocol
    from config.settings import DiscordSettings, QueueSettings


@dataclass(frozen=True, slots=True)
class AppDependencies:
    """Configuração e componentes imutáveis compartilhados entre requests."""

    discord: DiscordSettings
    queue: QueueSettings
    dispatcher: InteractionDispatcher
    worker: TaskHandlerProtocol
    verification_key: Ed25519PublicKey


def create_interaction_dispatcher(
    queue: QueueSettings,
    publisher: TaskPublisherProtocol,
) -> InteractionDispatcher:
    return InteractionDispatcher(
        publisher=publisher,
        queue_destination=queue.webhook_url,
        publish_timeout_seconds=queue.publish_timeout_seconds,
    )


def create_completion_worker(
    discord: DiscordSettings,
    queue: QueueSettings,
    http_client: httpx.AsyncClient | None = None,
) -> CompletionWorker:
    return CompletionWorker(
        followup_client=create_followup_client(discord, http_client=http_client),
        redeliver_on_failure=queue.redeliver_on_failure,
    )


def build_dependencies(
    discord: DiscordSettings,
    queue: QueueSettings,
    http_client: httpx.AsyncClient | None = None,
    verification_key: Ed25519PublicKey | None = None,
) -> AppDependencies:
    """Monta o grafo de dependências do serviço.

    Args:
        discord: Settings do Discord.
        queue: Settings da fila.
        http_client: AsyncClient compartilhado criado no lifespan.
        verification_key: Chave já carregada por validate_runtime_settings.
            Se None, é carregada de discord.public_key.

    Raises:
        ConfigurationError: Se a chave pública estiver ausente ou inválida.
    """
    if verification_key is None:
        verification_key = load_verification_key(discord.public_key)
    publisher = create_qstash_publisher(queue, http_client=http_client)
    return AppDependencies(
        discord=discord,
        queue=queue,
        dispatcher=create_interaction_dispatcher(queue, publisher),
        worker=create_completion_worker(discord, queue, http_client=http_client),
        verification_key=verification_key,
    )

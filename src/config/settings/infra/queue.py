"""Settings da fila de tasks diferidas (QStash).

A fila é um relay HTTP autenticado: publicamos o payload da task e o
serviço faz push (at-least-once) para o endpoint do worker.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class QueueSettings:
    """Configurações da fila de tasks.

    Attributes:
        qstash_token: Bearer token de autenticação no QStash
        webhook_url: URL de publicação (QStash + destino do worker)
        publish_timeout_seconds: Tempo máximo de publish dentro do ack
        redeliver_on_failure: Se True, falha no follow-up responde 500 ao
            delivery da fila para forçar redelivery
    """

    qstash_token: str = ""
    webhook_url: str = ""
    publish_timeout_seconds: float = 2.0
    redeliver_on_failure: bool = False

    def validate(self) -> list[str]:
        """Valida configurações da fila.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.qstash_token:
            errors.append("QSTASH_TOKEN não configurado")

        if not self.webhook_url:
            errors.append("QUEUE_WEBHOOK_URL não configurado")
        elif not self.webhook_url.startswith(("http://", "https://")):
            errors.append("QUEUE_WEBHOOK_URL deve ser uma URL http(s)")

        # Discord espera o ack em ~3s; o publish precisa caber nessa janela
        if not 0 < self.publish_timeout_seconds < 3:
            errors.append("QUEUE_PUBLISH_TIMEOUT_SECONDS deve estar entre 0 e 3")

        return errors


def _load_queue_from_env() -> QueueSettings:
    """Carrega QueueSettings de variáveis de ambiente."""
    return QueueSettings(
        qstash_token=os.getenv("QSTASH_TOKEN", ""),
        webhook_url=os.getenv("QUEUE_WEBHOOK_URL", ""),
        publish_timeout_seconds=float(os.getenv("QUEUE_PUBLISH_TIMEOUT_SECONDS", "2")),
        redeliver_on_failure=os.getenv("COMPLETION_REDELIVER_ON_FAILURE", "").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_queue_settings() -> QueueSettings:
    """Retorna instância cacheada de QueueSettings."""
    return _load_queue_from_env()

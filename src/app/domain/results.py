"""Resultados dos componentes do fluxo diferido.

Falhas best-effort são modeladas como valores (não exceções) para que o
chamador precise inspecionar ou descartar explicitamente o resultado.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class InteractionResponse:
    """Resposta HTTP imediata devolvida ao Discord."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PublishResult:
    """Resultado de um publish best-effort na fila."""

    success: bool
    error_type: str | None = None

    @classmethod
    def ok(cls) -> PublishResult:
        return cls(success=True)

    @classmethod
    def failed(cls, error_type: str) -> PublishResult:
        return cls(success=False, error_type=error_type)


@dataclass(frozen=True, slots=True)
class TaskAck:
    """Resultado do processamento de uma task entregue pela fila.

    Attributes:
        delivered: True se o follow-up foi editado no Discord
        redeliver: True se a fila deve reentregar a task (resposta não-2xx)
        error_type: Tipo do erro quando delivered=False
    """

    delivered: bool
    redeliver: bool = False
    error_type: str | None = None


__all__ = ["InteractionResponse", "PublishResult", "TaskAck"]

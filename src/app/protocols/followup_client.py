"""Protocolo de entrega do resultado via follow-up do Discord."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import CompletionMessage


class FollowupClientProtocol(Protocol):
    """Edita a resposta original da interação endereçada pelo token.

    Levanta FollowupDeliveryError em caso de falha.
    """

    async def edit_original(self, completion_token: str, message: CompletionMessage) -> None: ...

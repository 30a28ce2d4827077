"""Parse e validação inicial de interações Discord (sem PII).

Ordem obrigatória: assinatura sobre o corpo bruto primeiro; só então o
JSON é interpretado.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain import CommandOption, InboundInteraction
from app.infra.crypto import verify_interaction_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"


class InteractionRequestError(ValueError):
    """Erro base para falhas de request de interação."""


class InvalidSignatureError(InteractionRequestError):
    """Assinatura ausente ou inválida."""


class InvalidJsonError(InteractionRequestError):
    """JSON inválido ou fora do contrato de interação."""


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        # Mapping simples (dict) pode vir com capitalização original
        value = next((v for k, v in headers.items() if k.lower() == name), None)
    return value


def verify_interaction_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    public_key: Ed25519PublicKey | str,
) -> tuple[str, str]:
    """Valida a assinatura do request, independente do método HTTP.

    Raises:
        InvalidSignatureError: Se a assinatura não confere

    Returns:
        (signature, timestamp) dos headers
    """
    signature = _header(headers, SIGNATURE_HEADER)
    timestamp = _header(headers, TIMESTAMP_HEADER)
    if not verify_interaction_signature(timestamp, raw_body, signature, public_key):
        raise InvalidSignatureError("invalid_signature")
    return signature or "", timestamp or ""


def parse_interaction_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    public_key: Ed25519PublicKey | str,
) -> InboundInteraction:
    """Valida assinatura e converte o payload em InboundInteraction.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        public_key: Chave de verificação carregada no startup (ou hex)

    Raises:
        InvalidSignatureError: Se a assinatura não confere
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        InboundInteraction imutável
    """
    signature, timestamp = verify_interaction_request(raw_body, headers, public_key)

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return _build_interaction(payload, raw_body, signature, timestamp)


def _build_interaction(
    payload: dict[str, Any],
    raw_body: bytes,
    signature: str,
    timestamp: str,
) -> InboundInteraction:
    data = payload.get("data")
    if not isinstance(data, dict):
        data = {}
    raw_options = data.get("options")
    if not isinstance(raw_options, list):
        raw_options = []

    try:
        return InboundInteraction(
            type=payload.get("type", 0),
            command_name=data.get("name") or "",
            options=tuple(
                CommandOption.model_validate(option)
                for option in raw_options
                if isinstance(option, dict)
            ),
            completion_token=payload.get("token") or "",
            raw_body=raw_body,
            signature=signature,
            timestamp=timestamp,
        )
    except ValidationError as exc:
        raise InvalidJsonError("interaction_invalid") from exc

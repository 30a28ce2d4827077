"""Verificação de assinatura Ed25519 das interações Discord.

O Discord assina `timestamp || corpo bruto` com a chave privada da
aplicação; validamos com a chave pública configurada. Qualquer entrada
malformada resulta em False: a função nunca levanta exceção.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from utils.errors import ConfigurationError

from .constants import ED25519_PUBLIC_KEY_SIZE, ED25519_SIGNATURE_SIZE


def _decode_hex(value: str | None, expected_size: int) -> bytes | None:
    if not value or not isinstance(value, str):
        return None
    try:
        decoded = bytes.fromhex(value)
    except ValueError:
        return None
    if len(decoded) != expected_size:
        return None
    return decoded


def _resolve_key(public_key: Ed25519PublicKey | str | None) -> Ed25519PublicKey | None:
    if isinstance(public_key, Ed25519PublicKey):
        return public_key
    key_bytes = _decode_hex(public_key, ED25519_PUBLIC_KEY_SIZE)
    if key_bytes is None:
        return None
    try:
        return Ed25519PublicKey.from_public_bytes(key_bytes)
    except ValueError:
        return None


def verify_interaction_signature(
    timestamp: str | None,
    raw_body: bytes,
    signature: str | None,
    public_key: Ed25519PublicKey | str | None,
) -> bool:
    """Valida assinatura Ed25519 destacada de uma interação.

    Args:
        timestamp: Header X-Signature-Timestamp
        raw_body: Corpo bruto da requisição (sem re-encoding)
        signature: Header X-Signature-Ed25519 (hex, 64 bytes)
        public_key: Chave carregada no startup, ou hex de 32 bytes

    Returns:
        True se assinatura válida
    """
    if not isinstance(timestamp, str) or not isinstance(raw_body, bytes | bytearray):
        return False

    signature_bytes = _decode_hex(signature, ED25519_SIGNATURE_SIZE)
    key = _resolve_key(public_key)
    if signature_bytes is None or key is None:
        return False

    try:
        message = timestamp.encode("utf-8") + bytes(raw_body)
        key.verify(signature_bytes, message)
    except (InvalidSignature, ValueError):
        return False
    return True


def load_verification_key(public_key: str | None) -> Ed25519PublicKey:
    """Valida a chave pública configurada no startup.

    Raises:
        ConfigurationError: Se a chave estiver ausente ou inválida.
    """
    if not public_key:
        raise ConfigurationError("DISCORD_PUBLIC_KEY não configurada")
    key_bytes = _decode_hex(public_key, ED25519_PUBLIC_KEY_SIZE)
    if key_bytes is None:
        raise ConfigurationError("DISCORD_PUBLIC_KEY inválida (esperado hex de 32 bytes)")
    try:
        return Ed25519PublicKey.from_public_bytes(key_bytes)
    except ValueError as exc:
        raise ConfigurationError("DISCORD_PUBLIC_KEY inválida") from exc

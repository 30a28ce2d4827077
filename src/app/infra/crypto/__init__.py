"""Criptografia das interações Discord (assinatura Ed25519)."""

from .constants import ED25519_PUBLIC_KEY_SIZE, ED25519_SIGNATURE_SIZE
from .signature import load_verification_key, verify_interaction_signature

__all__ = [
    "ED25519_PUBLIC_KEY_SIZE",
    "ED25519_SIGNATURE_SIZE",
    "load_verification_key",
    "verify_interaction_signature",
]

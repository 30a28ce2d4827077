"""Constantes de tamanho para Ed25519 (em bytes)."""

ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

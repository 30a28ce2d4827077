"""Testes da verificação Ed25519 de interações."""

from __future__ import annotations

import pytest

from app.infra.crypto import load_verification_key, verify_interaction_signature
from utils.errors import ConfigurationError

BODY = b'{"type":1}'
TIMESTAMP = "1700000000"


def _flip_bit(data: bytes, index: int) -> bytes:
    mutated = bytearray(data)
    mutated[index] ^= 0x01
    return bytes(mutated)


def test_valid_signature(sign, public_key_hex: str) -> None:
    assert verify_interaction_signature(TIMESTAMP, BODY, sign(BODY, TIMESTAMP), public_key_hex)


def test_signature_covers_timestamp(sign, public_key_hex: str) -> None:
    signature = sign(BODY, TIMESTAMP)
    assert not verify_interaction_signature("1700000001", BODY, signature, public_key_hex)


@pytest.mark.parametrize("index", [0, 5, len(BODY) - 1])
def test_single_bit_body_mutation_fails(sign, public_key_hex: str, index: int) -> None:
    signature = sign(BODY, TIMESTAMP)
    assert not verify_interaction_signature(
        TIMESTAMP, _flip_bit(BODY, index), signature, public_key_hex
    )


@pytest.mark.parametrize("index", [0, 31, 63])
def test_single_bit_signature_mutation_fails(sign, public_key_hex: str, index: int) -> None:
    signature = bytes.fromhex(sign(BODY, TIMESTAMP))
    mutated = _flip_bit(signature, index).hex()
    assert not verify_interaction_signature(TIMESTAMP, BODY, mutated, public_key_hex)


def test_single_bit_timestamp_mutation_fails(sign, public_key_hex: str) -> None:
    signature = sign(BODY, TIMESTAMP)
    mutated = _flip_bit(TIMESTAMP.encode(), 0).decode()
    assert not verify_interaction_signature(mutated, BODY, signature, public_key_hex)


def test_body_is_verified_byte_exact(sign, public_key_hex: str) -> None:
    """Re-serializar o JSON (ex.: espaços) invalida a assinatura."""
    signature = sign(BODY, TIMESTAMP)
    assert not verify_interaction_signature(TIMESTAMP, b'{"type": 1}', signature, public_key_hex)


def test_wrong_public_key_fails(sign) -> None:
    other_key = "11" * 32
    assert not verify_interaction_signature(TIMESTAMP, BODY, sign(BODY, TIMESTAMP), other_key)


@pytest.mark.parametrize(
    "signature",
    ["", "zz" * 64, "abc", "ab" * 63, "ab" * 65, None],
)
def test_malformed_signature_returns_false(public_key_hex: str, signature) -> None:
    assert verify_interaction_signature(TIMESTAMP, BODY, signature, public_key_hex) is False


@pytest.mark.parametrize(
    "public_key",
    ["", "not-hex", "ab" * 31, "ab" * 33, "a" * 63, None],
)
def test_malformed_public_key_returns_false(sign, public_key) -> None:
    assert verify_interaction_signature(TIMESTAMP, BODY, sign(BODY, TIMESTAMP), public_key) is False


def test_missing_timestamp_returns_false(sign, public_key_hex: str) -> None:
    assert verify_interaction_signature(None, BODY, sign(BODY, TIMESTAMP), public_key_hex) is False


def test_load_verification_key_accepts_valid_key(public_key_hex: str) -> None:
    assert load_verification_key(public_key_hex) is not None


@pytest.mark.parametrize("public_key", ["", None, "xyz", "ab" * 10])
def test_load_verification_key_rejects_invalid_key(public_key) -> None:
    with pytest.raises(ConfigurationError, match="DISCORD_PUBLIC_KEY"):
        load_verification_key(public_key)


@pytest.mark.parametrize("timestamp", [None, 1700000000, b"1700000000"])
def test_non_string_timestamp_returns_false(sign, public_key_hex: str, timestamp) -> None:
    assert verify_interaction_signature(timestamp, BODY, sign(BODY, TIMESTAMP), public_key_hex) is False


def test_loaded_key_is_accepted(sign, public_key_hex: str) -> None:
    key = load_verification_key(public_key_hex)

    assert verify_interaction_signature(TIMESTAMP, BODY, sign(BODY, TIMESTAMP), key) is True
    assert verify_interaction_signature(TIMESTAMP, b"{}", sign(BODY, TIMESTAMP), key) is False

"""Configuração do pytest para o projeto."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import DiscordSettings, QueueSettings  # noqa: E402

TEST_TIMESTAMP = "1700000000"


@pytest.fixture
def signing_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


@pytest.fixture
def public_key_hex(signing_key: Ed25519PrivateKey) -> str:
    return signing_key.public_key().public_bytes_raw().hex()


@pytest.fixture
def sign(signing_key: Ed25519PrivateKey):
    """Assina `timestamp || body` como o Discord; retorna a assinatura hex."""

    def _sign(body: bytes, timestamp: str = TEST_TIMESTAMP) -> str:
        return signing_key.sign(timestamp.encode("utf-8") + body).hex()

    return _sign


@pytest.fixture
def discord_settings(public_key_hex: str) -> DiscordSettings:
    return DiscordSettings(
        public_key=public_key_hex,
        bot_token="bot-token",
        application_id="app-123",
    )


@pytest.fixture
def queue_settings() -> QueueSettings:
    return QueueSettings(
        qstash_token="qstash-token",
        webhook_url="https://qstash.example/v2/publish/https://worker.example/workers/hello",
        publish_timeout_seconds=0.5,
    )

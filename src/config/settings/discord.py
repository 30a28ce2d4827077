"""Settings específicas de Discord.

Configurações do canal Discord: verificação de interações (chave pública
Ed25519), webhook de follow-up e API REST de comandos da aplicação.
"""

from __future__ import annotations

import os
import string
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Discord API
DISCORD_API_VERSION: str = "v10"
DISCORD_API_BASE_URL: str = "https://discord.com/api"

# Ed25519: chave pública de 32 bytes (64 caracteres hex)
PUBLIC_KEY_HEX_LENGTH: int = 64


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        public_key: Chave pública (hex) para verificação de interações
        bot_token: Token do bot (usado apenas pelas rotas de comandos)
        application_id: ID da aplicação Discord
        api_version: Versão da API
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas nas chamadas de registro de comandos
    """

    # Credenciais
    public_key: str = ""
    bot_token: str = ""
    application_id: str = ""

    # API
    api_version: str = DISCORD_API_VERSION
    api_base_url: str = DISCORD_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 10.0
    max_retries: int = 3

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def commands_endpoint(self) -> str:
        """URL dos comandos globais da aplicação."""
        if not self.application_id:
            raise ValueError("application_id é obrigatório")
        return f"{self.api_endpoint}/applications/{self.application_id}/commands"

    def followup_endpoint(self, completion_token: str) -> str:
        """Retorna URL de edição da resposta original da interação.

        Args:
            completion_token: Token da interação (repassado sem alteração).

        Returns:
            URL no formato .../webhooks/{application_id}/{token}/messages/@original
        """
        if not self.application_id:
            raise ValueError("application_id é obrigatório")
        return (
            f"{self.api_endpoint}/webhooks/{self.application_id}/"
            f"{completion_token}/messages/@original"
        )

    @property
    def has_valid_public_key(self) -> bool:
        """True se a chave pública tem formato hex de 32 bytes."""
        key = self.public_key
        return len(key) == PUBLIC_KEY_HEX_LENGTH and all(c in string.hexdigits for c in key)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.application_id:
            errors.append("DISCORD_APPLICATION_ID não configurado")

        if not self.bot_token:
            errors.append("DISCORD_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("DISCORD_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings a partir de variáveis de ambiente."""
    return DiscordSettings(
        public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
        bot_token=os.getenv("DISCORD_TOKEN", ""),
        application_id=os.getenv("DISCORD_APPLICATION_ID", ""),
        api_version=os.getenv("DISCORD_API_VERSION", DISCORD_API_VERSION),
        api_base_url=os.getenv("DISCORD_API_BASE_URL", DISCORD_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "10")),
        max_retries=int(os.getenv("DISCORD_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()

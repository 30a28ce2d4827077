"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos. As dependências são construídas
uma vez no startup e passadas explicitamente (via app.state) às rotas.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings(base, discord, queue)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.crypto import load_verification_key
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings
from utils.errors import ConfigurationError

from .dependencies import AppDependencies, build_dependencies

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

    from config.settings import BaseSettings, DiscordSettings, QueueSettings

logger = logging.getLogger(__name__)


def initialize_app(settings: BaseSettings | None = None) -> None:
    """Configura logging JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = settings or get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name="discord_deferred_bot_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(
    base: BaseSettings,
    discord: DiscordSettings,
    queue: QueueSettings,
) -> Ed25519PublicKey:
    """Valida settings obrigatórias no startup.

    Chave pública ausente ou inválida é sempre fatal. Demais erros
    bloqueiam o boot apenas em staging/production.

    Returns:
        Chave de verificação carregada, reutilizada em todas as requests.

    Raises:
        ConfigurationError: Configuração inválida para o ambiente.
    """
    try:
        verification_key = load_verification_key(discord.public_key)
    except ConfigurationError as exc:
        logger.critical(
            "verification_key_invalid",
            extra={"component": "bootstrap", "error": str(exc)},
        )
        raise

    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"discord: {error}" for error in discord.validate())
    errors.extend(f"queue: {error}" for error in queue.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return verification_key

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Configuração inválida para {base.environment}:\n{details}")
    return verification_key


__all__ = [
    "AppDependencies",
    "build_dependencies",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]

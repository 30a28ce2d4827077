"""Entrypoint do serviço de comandos Discord diferidos.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import build_dependencies, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_discord_settings, get_queue_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap import AppDependencies

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida settings (chave pública ausente aborta o boot)
    - Cria AsyncClient compartilhado e monta as dependências

    Shutdown:
    - Fecha o AsyncClient
    """
    logger.info("app_starting")
    if getattr(app.state, "dependencies", None) is not None:
        # Dependências injetadas (testes): não há recursos a gerenciar
        yield
        return

    base = get_base_settings()
    discord = get_discord_settings()
    queue = get_queue_settings()
    verification_key = validate_runtime_settings(base, discord, queue)

    http_client = httpx.AsyncClient()
    app.state.dependencies = build_dependencies(
        discord,
        queue,
        http_client=http_client,
        verification_key=verification_key,
    )
    try:
        yield
    finally:
        logger.info("app_shutting_down")
        await http_client.aclose()


def create_app(dependencies: AppDependencies | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        dependencies: Dependências já montadas. Se None, são construídas
            no lifespan a partir das variáveis de ambiente.
    """
    fastapi_app = FastAPI(
        title="discord-deferred-bot",
        description="Dispatcher de slash commands Discord com resposta diferida",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )
    fastapi_app.state.dependencies = dependencies
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")
    return fastapi_app


initialize_app()

# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting discord-deferred-bot in development mode")
    uvicorn.run("app.app:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    main()

"""Acesso às dependências montadas no startup (app.state)."""

from __future__ import annotations

from fastapi import Request

from app.bootstrap import AppDependencies


def get_app_dependencies(request: Request) -> AppDependencies:
    """Retorna as dependências registradas no lifespan.

    Raises:
        RuntimeError: Se a aplicação não passou pelo startup.
    """
    dependencies = getattr(request.app.state, "dependencies", None)
    if dependencies is None:
        raise RuntimeError("dependências não inicializadas (lifespan não executado)")
    return dependencies

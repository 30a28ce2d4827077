"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (interações, worker da fila, health)
- Validação inicial de request (assinatura, JSON)
- Delegação para use cases via dependências do startup
- Respostas HTTP apropriadas

Estrutura:
- routes/discord/: interações Discord e worker de conclusão
- routes/health/: health checks e readiness
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

"""Router do Discord — agrega interações e worker de conclusão."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.discord.interactions import router as interactions_router
from api.routes.discord.worker import router as worker_router

router = APIRouter()

# POST /interactions (webhook assinado do Discord)
router.include_router(interactions_router, prefix="/interactions")

# POST /workers/hello (push da fila)
router.include_router(worker_router, prefix="/workers")

"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="discord-deferred-bot",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe baseada nas dependências montadas no startup.

    Interações exigem chave pública; a fila e o follow-up degradam o fluxo
    diferido mas não impedem PING/respostas inline.
    """
    dependencies = getattr(request.app.state, "dependencies", None)
    if dependencies is None:
        checks = {
            "verification_key": DependencyCheck(status="failed", error="not_initialized"),
            "queue": DependencyCheck(status="failed", error="not_initialized"),
            "discord_api": DependencyCheck(status="failed", error="not_initialized"),
        }
    else:
        checks = {
            "verification_key": _check_verification_key(dependencies.discord),
            "queue": _check_settings(dependencies.queue.validate()),
            "discord_api": _check_settings(dependencies.discord.validate()),
        }

    ready = checks["verification_key"].status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {name: check.as_dict() for name, check in checks.items()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_verification_key(discord_settings: Any) -> DependencyCheck:
    if discord_settings.has_valid_public_key:
        return DependencyCheck(status="ok")
    return DependencyCheck(status="failed", error="invalid_public_key")


def _check_settings(errors: list[str]) -> DependencyCheck:
    if not errors:
        return DependencyCheck(status="ok")
    logger.warning("readiness_settings_degraded", extra={"error_count": len(errors)})
    return DependencyCheck(status="degraded", error="; ".join(errors))

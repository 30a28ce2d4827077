"""Endpoint de interações Discord.

Endpoints:
- POST /interactions: recebe interações assinadas (PING ou comando)
- Demais métodos: assinatura verificada, depois 405 com corpo vazio

Segurança:
- Assinatura Ed25519 obrigatória antes de qualquer parsing (401 se inválida),
  para qualquer método HTTP
- Resposta rápida: Discord espera o ack em ~3s; o resultado de comandos
  diferidos é entregue depois pelo worker
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.connectors.discord.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_interaction_request,
    verify_interaction_request,
)
from api.routes.dependencies import get_app_dependencies
from app.bootstrap import AppDependencies
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()

INTERACTION_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("", methods=INTERACTION_METHODS, response_model=None)
async def receive_interaction(
    request: Request,
    dependencies: AppDependencies = Depends(get_app_dependencies),
) -> JSONResponse:
    """Recebimento de interações Discord.

    Returns:
        JSONResponse com `type` 1/4/5 (200), 401, 400 ou 405.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        raw_body = await request.body()

        try:
            if request.method != "POST":
                verify_interaction_request(
                    raw_body=raw_body,
                    headers=request.headers,
                    public_key=dependencies.verification_key,
                )
                logger.info("interaction_method_not_allowed", extra={"method": request.method})
                return _respond({}, status.HTTP_405_METHOD_NOT_ALLOWED)

            interaction = parse_interaction_request(
                raw_body=raw_body,
                headers=request.headers,
                public_key=dependencies.verification_key,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "interaction_signature_invalid",
                extra={"channel": "discord", "method": request.method, "error": str(exc)},
            )
            return _respond({"error": "invalid request signature"}, status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError as exc:
            logger.warning(
                "interaction_json_invalid",
                extra={"channel": "discord", "error": str(exc)},
            )
            return _respond({"error": "invalid request body"}, status.HTTP_400_BAD_REQUEST)

        logger.info(
            "interaction_received",
            extra={
                "channel": "discord",
                "interaction_type": interaction.type,
                "command": interaction.command_name or None,
                "payload_size": len(raw_body),
            },
        )

        response = await dependencies.dispatcher.dispatch(interaction)
        return _respond(response.body, response.status_code)
    finally:
        reset_correlation_id(token)


def _respond(body: dict[str, Any], status_code: int) -> JSONResponse:
    return JSONResponse(
        content=body,
        status_code=status_code,
        headers={"x-correlation-id": get_correlation_id()},
    )

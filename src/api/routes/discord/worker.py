"""Endpoint chamado pela fila para concluir tasks diferidas (push).

Endpoints:
- POST /workers/hello: body {discord_message_token, name}

Responde 200 com corpo vazio mesmo quando a edição no Discord falha,
exceto se COMPLETION_REDELIVER_ON_FAILURE estiver ativo (500 → a fila
reentrega). Body malformado responde 400: reentregar não corrige.
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request, Response, status

from api.routes.dependencies import get_app_dependencies
from app.bootstrap import AppDependencies
from app.domain import QueuedTask
from app.observability import reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/hello")
async def complete_hello(
    request: Request,
    dependencies: AppDependencies = Depends(get_app_dependencies),
) -> Response:
    """Recebe a task da fila e delega ao worker de conclusão."""
    # Upstash envia o id da mensagem; usamos como correlation_id
    token = set_correlation_id(
        request.headers.get("upstash-message-id") or request.headers.get("x-correlation-id")
    )
    try:
        raw_body = await request.body()
        try:
            payload = json.loads(raw_body or b"{}")
            if not isinstance(payload, dict):
                raise ValueError("payload_not_object")
            task = QueuedTask.from_payload(payload)
        except ValueError as exc:
            logger.warning(
                "completion_task_invalid",
                extra={"error": str(exc), "payload_size": len(raw_body)},
            )
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "completion_task_received",
            extra={
                "command": task.command_name,
                "retried": request.headers.get("upstash-retried", "0"),
            },
        )
        ack = await dependencies.worker.handle(task)
        if ack.redeliver:
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(status_code=status.HTTP_200_OK)
    finally:
        reset_correlation_id(token)

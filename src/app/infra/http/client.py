"""Cliente HTTP base para chamadas externas (fila e Discord)."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `max_retries=0` desliga retries: publisher e follow-up não reenviam,
    quem reentrega é a fila.
    """

    timeout_seconds: float = 10.0
    max_retries: int = 0
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis (sem URL, sem token)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP com retry/backoff opcional para status transitórios.

    Args:
        config: Timeouts, retries e headers padrão.
        http_client: AsyncClient compartilhado (criado no lifespan). Se
            None, cada requisição abre um cliente próprio.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    async def get(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return await self.request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        json: Any,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", url, json=json, headers=headers)

    async def patch(
        self,
        url: str,
        json: Any,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("PATCH", url, json=json, headers=headers)

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return await self.request("DELETE", url, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição; respostas não-2xx viram HttpError.

        Raises:
            HttpError: status >= 400, timeout, erro de conexão ou request
                impossível de montar (URL inválida, JSON não serializável).
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        for attempt in range(self._config.max_retries + 1):
            try:
                response = await self._send(method, url, json, merged_headers)
                _raise_for_status(response)
                return response
            except HttpError as exc:
                if not exc.is_retryable or attempt >= self._config.max_retries:
                    raise
            except httpx.TransportError as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError(
                        f"http_connection_error:{type(exc).__name__}",
                        is_retryable=True,
                    ) from exc
            except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
                # URL inválida ou corpo não serializável: reenviar não corrige
                raise HttpError(f"http_request_invalid:{type(exc).__name__}") from exc
            await _backoff_sleep(
                attempt,
                self._config.backoff_base_seconds,
                self._config.backoff_max_seconds,
            )
        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def _send(
        self,
        method: str,
        url: str,
        json: Any,
        headers: dict[str, str],
    ) -> httpx.Response:
        timeout = self._config.timeout_seconds
        if self._http_client is not None:
            return await self._http_client.request(
                method, url, json=json, headers=headers, timeout=timeout
            )
        async with httpx.AsyncClient() as client:
            return await client.request(method, url, json=json, headers=headers, timeout=timeout)


def _raise_for_status(response: httpx.Response) -> None:
    status_code = response.status_code
    if status_code < 400:
        return
    raise HttpError(
        "http_error_status",
        status_code=status_code,
        is_retryable=status_code == 429 or status_code >= 500,
    )


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)

"""Testes do publisher QStash e do publish best-effort."""

from __future__ import annotations

import asyncio
import json
import logging

import httpx
import pytest

from app.domain import QueuedTask
from app.infra.http import HttpClient, HttpClientConfig
from app.infra.queue import QStashTaskPublisher, create_qstash_publisher, publish_best_effort
from config.settings import QueueSettings
from utils.errors import TaskPublishError

DESTINATION = "https://qstash.example/v2/publish/https://worker.example/workers/hello"


def _task() -> QueuedTask:
    return QueuedTask(completion_token="tok-1", command_name="hello", arguments={"name": "Bob"})


def _publisher(handler, token: str = "qs-token") -> QStashTaskPublisher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return QStashTaskPublisher(token, HttpClient(HttpClientConfig(), http_client=client))


@pytest.mark.asyncio
async def test_publish_posts_task_with_bearer_token() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(201, json={"messageId": "msg-1"})

    await _publisher(handler).publish(DESTINATION, _task())

    assert len(captured) == 1
    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == DESTINATION
    assert request.headers["authorization"] == "Bearer qs-token"
    assert json.loads(request.content) == {
        "discord_message_token": "tok-1",
        "name": "Bob",
        "command": "hello",
    }


@pytest.mark.asyncio
async def test_publish_does_not_retry_and_raises_on_error_status() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(503)

    publisher = create_qstash_publisher(
        settings=QueueSettings(qstash_token="qs-token", webhook_url=DESTINATION),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    with pytest.raises(TaskPublishError):
        await publisher.publish(DESTINATION, _task())
    assert calls == 1


@pytest.mark.asyncio
async def test_publish_connection_error_raises_task_publish_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(TaskPublishError):
        await _publisher(handler).publish(DESTINATION, _task())


@pytest.mark.asyncio
async def test_publish_without_token_fails_before_sending() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover
        raise AssertionError("não deveria enviar")

    with pytest.raises(TaskPublishError, match="qstash_token_missing"):
        await _publisher(handler, token="").publish(DESTINATION, _task())


class _FailingPublisher:
    async def publish(self, destination: str, task: QueuedTask) -> None:
        raise TaskPublishError("boom")


class _SlowPublisher:
    async def publish(self, destination: str, task: QueuedTask) -> None:
        await asyncio.sleep(5)


class _RecordingPublisher:
    def __init__(self) -> None:
        self.calls: list[tuple[str, QueuedTask]] = []

    async def publish(self, destination: str, task: QueuedTask) -> None:
        self.calls.append((destination, task))


@pytest.mark.asyncio
async def test_best_effort_reports_success() -> None:
    publisher = _RecordingPublisher()
    result = await publish_best_effort(publisher, DESTINATION, _task(), timeout_seconds=1.0)
    assert result.success is True
    assert publisher.calls == [(DESTINATION, _task())]


@pytest.mark.asyncio
async def test_best_effort_swallows_publish_error() -> None:
    result = await publish_best_effort(_FailingPublisher(), DESTINATION, _task(), 1.0)
    assert result.success is False
    assert result.error_type == "TaskPublishError"


@pytest.mark.asyncio
async def test_best_effort_times_out() -> None:
    result = await publish_best_effort(_SlowPublisher(), DESTINATION, _task(), 0.05)
    assert result.success is False
    assert result.error_type == "TimeoutError"


class _BrokenPublisher:
    async def publish(self, destination: str, task: QueuedTask) -> None:
        raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_best_effort_swallows_unexpected_error(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        result = await publish_best_effort(_BrokenPublisher(), DESTINATION, _task(), 1.0)

    assert result.success is False
    assert result.error_type == "RuntimeError"
    failed = [r for r in caplog.records if r.getMessage() == "task_publish_failed"]
    assert failed[0].error_type == "RuntimeError"


@pytest.mark.asyncio
async def test_publish_non_json_compliant_task_raises_task_publish_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201)

    task = QueuedTask(completion_token="tok-1", command_name="hello", arguments={"name": float("nan")})

    with pytest.raises(TaskPublishError, match="http_request_invalid"):
        await _publisher(handler).publish(DESTINATION, task)

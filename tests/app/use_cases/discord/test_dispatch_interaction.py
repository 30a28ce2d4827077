"""Testes do InteractionDispatcher."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.domain import CommandOption, InboundInteraction, QueuedTask
from app.use_cases.discord import InteractionDispatcher
from utils.errors import TaskPublishError

DESTINATION = "https://queue.example/publish"


class FakePublisher:
    def __init__(self, error: Exception | None = None, delay: float = 0.0) -> None:
        self.published: list[tuple[str, QueuedTask]] = []
        self._error = error
        self._delay = delay

    async def publish(self, destination: str, task: QueuedTask) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        self.published.append((destination, task))


def _hello(name: str | None = "Bob", token: str = "tok-1") -> InboundInteraction:
    options = (CommandOption(name="name", value=name),) if name is not None else ()
    return InboundInteraction(type=2, command_name="hello", options=options, completion_token=token)


@pytest.mark.asyncio
async def test_ping_returns_pong_without_publishing() -> None:
    publisher = FakePublisher()
    response = await InteractionDispatcher(publisher, DESTINATION).dispatch(
        InboundInteraction(type=1)
    )

    assert response.status_code == 200
    assert response.body == {"type": 1}
    assert publisher.published == []


@pytest.mark.asyncio
async def test_hello_publishes_task_and_defers() -> None:
    publisher = FakePublisher()
    response = await InteractionDispatcher(publisher, DESTINATION).dispatch(_hello())

    assert response.status_code == 200
    assert response.body == {"type": 5}
    assert len(publisher.published) == 1
    destination, task = publisher.published[0]
    assert destination == DESTINATION
    assert task.completion_token == "tok-1"
    assert task.command_name == "hello"
    assert dict(task.arguments) == {"name": "Bob"}


@pytest.mark.asyncio
async def test_hello_without_option_sends_empty_name() -> None:
    publisher = FakePublisher()
    await InteractionDispatcher(publisher, DESTINATION).dispatch(_hello(name=None))

    assert dict(publisher.published[0][1].arguments) == {"name": ""}


@pytest.mark.asyncio
async def test_publish_failure_still_defers(caplog: pytest.LogCaptureFixture) -> None:
    publisher = FakePublisher(error=TaskPublishError("queue_publish_failed"))

    with caplog.at_level(logging.INFO):
        response = await InteractionDispatcher(publisher, DESTINATION).dispatch(_hello())

    assert response.body == {"type": 5}
    deferred = [r for r in caplog.records if r.getMessage() == "command_deferred"]
    assert deferred[0].publish_success is False
    assert deferred[0].publish_error_type == "TaskPublishError"


@pytest.mark.asyncio
async def test_slow_publish_is_bounded_by_timeout() -> None:
    publisher = FakePublisher(delay=1.0)
    dispatcher = InteractionDispatcher(publisher, DESTINATION, publish_timeout_seconds=0.01)

    response = await dispatcher.dispatch(_hello())

    assert response.body == {"type": 5}
    assert publisher.published == []


@pytest.mark.asyncio
async def test_missing_token_defers_without_publishing() -> None:
    publisher = FakePublisher()
    response = await InteractionDispatcher(publisher, DESTINATION).dispatch(_hello(token=""))

    assert response.body == {"type": 5}
    assert publisher.published == []


@pytest.mark.asyncio
async def test_unknown_command_is_answered_inline() -> None:
    publisher = FakePublisher()
    interaction = InboundInteraction(type=2, command_name="other", completion_token="tok")

    response = await InteractionDispatcher(publisher, DESTINATION).dispatch(interaction)

    assert response.status_code == 200
    assert response.body == {"type": 4, "data": {"content": "Hello world!"}}
    assert publisher.published == []


@pytest.mark.asyncio
@pytest.mark.parametrize("interaction_type", [0, 3, 4, 5, 99])
async def test_unsupported_type_is_method_not_allowed(interaction_type: int) -> None:
    publisher = FakePublisher()
    response = await InteractionDispatcher(publisher, DESTINATION).dispatch(
        InboundInteraction(type=interaction_type)
    )

    assert response.status_code == 405
    assert response.body == {}
    assert publisher.published == []


@pytest.mark.asyncio
async def test_unexpected_publisher_error_still_defers(caplog: pytest.LogCaptureFixture) -> None:
    publisher = FakePublisher(error=RuntimeError("boom"))

    with caplog.at_level(logging.INFO):
        response = await InteractionDispatcher(publisher, DESTINATION).dispatch(_hello())

    assert response.status_code == 200
    assert response.body == {"type": 5}
    deferred = [r for r in caplog.records if r.getMessage() == "command_deferred"]
    assert deferred[0].publish_error_type == "RuntimeError"


@pytest.mark.asyncio
async def test_custom_command_table_is_used_for_lookup() -> None:
    publisher = FakePublisher()
    dispatcher = InteractionDispatcher(publisher, DESTINATION, commands={})

    response = await dispatcher.dispatch(_hello())

    assert response.body == {"type": 4, "data": {"content": "Hello world!"}}
    assert publisher.published == []

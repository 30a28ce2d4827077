"""Testes do script de gerenciamento de application commands."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from app.domain.commands import DiscordBotCommand
from config.settings import DiscordSettings
from utils.errors import DiscordApiError

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "manage_commands.py"


def _load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("manage_commands", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class FakeCommandsClient:
    def __init__(self, error: Exception | None = None) -> None:
        self.registered: list[DiscordBotCommand] = []
        self.deleted: list[str] = []
        self._error = error

    async def list_commands(self) -> list[DiscordBotCommand]:
        if self._error is not None:
            raise self._error
        return [DiscordBotCommand(id="111", name="hello", description="greets")]

    async def register_command(self, command: DiscordBotCommand) -> DiscordBotCommand:
        self.registered.append(command)
        return command.model_copy(update={"id": "222"})

    async def unregister_command(self, command_id: str) -> None:
        self.deleted.append(command_id)


@pytest.fixture
def script(monkeypatch: pytest.MonkeyPatch) -> ModuleType:
    module = _load_script()
    monkeypatch.setattr(module, "initialize_app", lambda: None)
    monkeypatch.setattr(
        module,
        "get_discord_settings",
        lambda: DiscordSettings(bot_token="bot-token", application_id="app-123"),
    )
    return module


def _use_client(monkeypatch: pytest.MonkeyPatch, module: ModuleType, client: FakeCommandsClient) -> None:
    monkeypatch.setattr(module, "create_commands_client", lambda _settings: client)


def test_list_prints_commands(script, monkeypatch, capsys) -> None:
    _use_client(monkeypatch, script, FakeCommandsClient())

    assert script.main(["list"]) == 0
    assert "111\thello\tgreets" in capsys.readouterr().out


def test_register_defaults_to_whole_command_table(script, monkeypatch, capsys) -> None:
    client = FakeCommandsClient()
    _use_client(monkeypatch, script, client)

    assert script.main(["register"]) == 0
    assert [command.name for command in client.registered] == ["hello"]
    assert "222\thello" in capsys.readouterr().out


def test_register_unknown_name_fails(script, monkeypatch) -> None:
    client = FakeCommandsClient()
    _use_client(monkeypatch, script, client)

    assert script.main(["register", "--name", "nope"]) == 2
    assert client.registered == []


def test_delete_forwards_command_id(script, monkeypatch) -> None:
    client = FakeCommandsClient()
    _use_client(monkeypatch, script, client)

    assert script.main(["delete", '"333"']) == 0
    assert client.deleted == ['"333"']


def test_api_error_returns_exit_code_one(script, monkeypatch, capsys) -> None:
    _use_client(monkeypatch, script, FakeCommandsClient(error=DiscordApiError("list_commands_failed")))

    assert script.main(["list"]) == 1
    assert "list_commands_failed" in capsys.readouterr().err

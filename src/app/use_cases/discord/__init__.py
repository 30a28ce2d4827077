"""Casos de uso do fluxo de comandos Discord."""

from app.use_cases.discord.commands import COMMAND_TABLE, CommandSpec, get_command, render_hello
from app.use_cases.discord.complete_task import CompletionWorker
from app.use_cases.discord.dispatch_interaction import InteractionDispatcher

__all__ = [
    "COMMAND_TABLE",
    "CommandSpec",
    "CompletionWorker",
    "InteractionDispatcher",
    "get_command",
    "render_hello",
]

"""Tabela estática de comandos.

Cada entrada define se o comando é diferido (processado pelo worker via
fila) ou respondido inline, e como o resultado final é calculado a partir
dos argumentos da task. A tabela é imutável e construída uma vez.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from app.domain.commands import ApplicationCommandOptionType, DiscordBotCommand, DiscordCommandOption

# Resposta inline para comandos desconhecidos ou não diferidos
DEFAULT_IMMEDIATE_CONTENT = "Hello world!"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Comando conhecido pelo dispatcher.

    Attributes:
        name: Nome do slash command
        description: Descrição exibida no Discord
        deferred: True se o resultado é entregue depois, via worker
        argument_name: Nome do argumento que recebe o valor da 1ª opção
        render: Calcula o conteúdo final a partir dos argumentos
    """

    name: str
    description: str
    deferred: bool
    argument_name: str | None = None
    render: Callable[[Mapping[str, Any]], str] = field(default=lambda _args: DEFAULT_IMMEDIATE_CONTENT)

    def to_definition(self) -> DiscordBotCommand:
        """Definição usada no registro do comando via API REST."""
        options = []
        if self.argument_name:
            options.append(
                DiscordCommandOption(
                    name=self.argument_name,
                    description=f"The {self.argument_name} to use",
                    type=ApplicationCommandOptionType.STRING,
                    required=True,
                )
            )
        return DiscordBotCommand(name=self.name, description=self.description, options=options)


def render_hello(arguments: Mapping[str, Any]) -> str:
    """Saudação do comando hello (espaço final preservado)."""
    name = arguments.get("name")
    return "Hello world, " + ("" if name is None else str(name)) + "! "


def _build_command_table(*specs: CommandSpec) -> Mapping[str, CommandSpec]:
    return MappingProxyType({spec.name: spec for spec in specs})


COMMAND_TABLE: Mapping[str, CommandSpec] = _build_command_table(
    CommandSpec(
        name="hello",
        description="Replies with a greeting after a short while",
        deferred=True,
        argument_name="name",
        render=render_hello,
    ),
)


def get_command(
    name: str,
    commands: Mapping[str, CommandSpec] = COMMAND_TABLE,
) -> CommandSpec | None:
    """Busca o comando pelo nome; None para comandos desconhecidos."""
    if not name:
        return None
    return commands.get(name)

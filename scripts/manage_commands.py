#!/usr/bin/env python3
"""Gerencia os application commands globais da aplicação Discord.

Uso:
    python scripts/manage_commands.py list
    python scripts/manage_commands.py register            # todos da tabela
    python scripts/manage_commands.py register --name hello
    python scripts/manage_commands.py delete <command_id>

Requer DISCORD_TOKEN e DISCORD_APPLICATION_ID no ambiente.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from app.bootstrap import initialize_app
from app.infra.discord import create_commands_client
from app.use_cases.discord import COMMAND_TABLE
from config.logging import get_logger
from config.settings import get_discord_settings
from utils.errors import DiscordApiError

logger = get_logger(__name__)


async def list_commands() -> int:
    client = create_commands_client(get_discord_settings())
    for command in await client.list_commands():
        print(f"{command.id}\t{command.name}\t{command.description}")
    return 0


async def register_commands(names: list[str] | None) -> int:
    selected = names or list(COMMAND_TABLE)
    unknown = [name for name in selected if name not in COMMAND_TABLE]
    if unknown:
        print(f"Comandos desconhecidos: {', '.join(unknown)}", file=sys.stderr)
        return 2

    client = create_commands_client(get_discord_settings())
    for name in selected:
        registered = await client.register_command(COMMAND_TABLE[name].to_definition())
        print(f"{registered.id or '-'}\t{registered.name}")
    return 0


async def delete_command(command_id: str) -> int:
    client = create_commands_client(get_discord_settings())
    await client.unregister_command(command_id)
    print(f"removido: {command_id}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    subparsers = parser.add_subparsers(dest="action", required=True)

    subparsers.add_parser("list", help="lista comandos registrados")

    register = subparsers.add_parser("register", help="registra comandos da tabela")
    register.add_argument("--name", action="append", dest="names", help="nome do comando")

    delete = subparsers.add_parser("delete", help="remove comando pelo ID")
    delete.add_argument("command_id")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    initialize_app()

    if args.action == "list":
        coroutine = list_commands()
    elif args.action == "register":
        coroutine = register_commands(args.names)
    else:
        coroutine = delete_command(args.command_id)

    try:
        return asyncio.run(coroutine)
    except (DiscordApiError, ValueError) as exc:
        logger.error("manage_commands_failed", extra={"action": args.action, "error": str(exc)})
        print(f"erro: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

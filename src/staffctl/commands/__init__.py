"""Subcommand modules for staffctl.

Provides register_commands() which uses deferred imports to keep
``staffctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group.

    3 mutating commands + 4 query commands + the interactive shell.
    """
    # --- Mutations ---
    from staffctl.commands.manage import add, delete, modify

    cli.add_command(add)
    cli.add_command(delete)
    cli.add_command(modify)

    # --- Queries ---
    from staffctl.commands.query import count, get, list_cmd, search

    cli.add_command(get)
    cli.add_command(search)
    cli.add_command(list_cmd)
    cli.add_command(count)

    # --- Interactive ---
    from staffctl.commands.shell import shell

    cli.add_command(shell)

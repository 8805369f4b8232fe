"""Subcommand modules for modgit.

Provides register_commands() which uses deferred imports to keep
``modgit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from modgit.commands.catalog import list_cmd, show
    from modgit.commands.check import check
    from modgit.commands.classify import classify
    from modgit.commands.plan import plan
    from modgit.commands.resolve import context, resolve
    from modgit.commands.workspace import status, switch

    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(resolve)
    cli.add_command(context)
    cli.add_command(plan)
    cli.add_command(classify)
    cli.add_command(check)
    cli.add_command(switch)
    cli.add_command(status)

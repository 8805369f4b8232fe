"""Commands: list modules and show one definition."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modgit.commands._base import ModgitCommand
from modgit.services.catalog import CatalogService

if TYPE_CHECKING:
    from modgit.commands._context import AppContext


@click.command(
    "list",
    cls=ModgitCommand,
    examples="""\
  modgit list
  modgit -q list
  modgit --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the modules defined in .modgit."""
    app.emit(CatalogService(app.workspace).list_modules())


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit show frontend
  modgit show frontend/css
  modgit --json show core""",
)
@click.argument("module")
@click.pass_obj
def show(app: AppContext, module: str) -> None:
    """Show one module's definition (after parent inheritance)."""
    app.emit(CatalogService(app.workspace).show(module))

"""Command: plan the dev-view sparse-checkout patterns of a module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modgit.commands._base import ModgitCommand
from modgit.services.visibility import VisibilityService

if TYPE_CHECKING:
    from modgit.commands._context import AppContext


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit plan frontend
  modgit -q plan frontend > .git/info/sparse-checkout
  modgit --json plan apps/web""",
)
@click.argument("module")
@click.pass_obj
def plan(app: AppContext, module: str) -> None:
    """Show what stays visible and what is hidden when working on MODULE."""
    app.emit(VisibilityService(app.workspace).plan(module))

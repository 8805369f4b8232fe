"""Commands: resolve a module's transitive paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modgit.commands._base import ModgitCommand
from modgit.services.resolve import ResolveService

if TYPE_CHECKING:
    from modgit.commands._context import AppContext


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit resolve frontend
  modgit -q resolve frontend | xargs ls
  modgit --json resolve frontend/css""",
)
@click.argument("module")
@click.pass_obj
def resolve(app: AppContext, module: str) -> None:
    """Print every path MODULE needs, dependencies included."""
    app.emit(ResolveService(app.workspace).resolve(module))


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit context frontend
  modgit context frontend > CONTEXT.md""",
)
@click.argument("module")
@click.pass_obj
def context(app: AppContext, module: str) -> None:
    """Print a context summary of MODULE's paths for assistants."""
    app.emit(ResolveService(app.workspace).context(module))

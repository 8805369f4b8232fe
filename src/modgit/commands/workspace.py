"""Commands: apply a module view to the working tree and report status."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modgit.commands._base import ModgitCommand
from modgit.services.workspace import WorkspaceService

if TYPE_CHECKING:
    from modgit.commands._context import AppContext


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit switch frontend
  modgit switch frontend --dev
  modgit switch --module frontend --dry-run""",
)
@click.argument("module", required=False)
@click.option("--module", "module_opt", default=None, help="Module to switch to.")
@click.option("--dev", is_flag=True, help="Hide other modules instead of showing only this one.")
@click.option("--dry-run", is_flag=True, help="Print the patterns without running git.")
@click.pass_obj
def switch(
    app: AppContext,
    module: str | None,
    module_opt: str | None,
    dev: bool,
    dry_run: bool,
) -> None:
    """Restrict the working tree to MODULE via git sparse-checkout."""
    name = module_opt or module
    if not name:
        raise click.UsageError("module name is required")
    app.emit(WorkspaceService(app.workspace).switch(name, dev=dev, dry_run=dry_run))


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit status frontend
  modgit -q status frontend | xargs git add""",
)
@click.argument("module")
@click.pass_obj
def status(app: AppContext, module: str) -> None:
    """Split the working tree's changes into inside/outside MODULE."""
    app.emit(WorkspaceService(app.workspace).status(module))

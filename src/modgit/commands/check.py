"""Command: catalog validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modgit.commands._base import ModgitCommand

if TYPE_CHECKING:
    from modgit.commands._context import AppContext


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit check
  modgit check --errors-only
  modgit --json check""",
)
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(app: AppContext, min_severity: str, errors_only: bool) -> None:
    """Check the module catalog for cycles, unknown names and stray paths."""
    from modgit.services.check import CheckService

    threshold = "error" if errors_only else min_severity
    app.emit(CheckService(app.workspace).check(min_severity=threshold))

"""Command: classify file paths against a module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from modgit.commands._base import ModgitCommand
from modgit.services.classify import ClassifyService

if TYPE_CHECKING:
    from modgit.commands._context import AppContext


@click.command(
    cls=ModgitCommand,
    examples="""\
  modgit classify frontend src/frontend/app.ts docs/index.md
  git diff --name-only | modgit classify frontend -
  modgit -q classify frontend src/core/db.py""",
)
@click.argument("module")
@click.argument("paths", nargs=-1)
@click.pass_obj
def classify(app: AppContext, module: str, paths: tuple[str, ...]) -> None:
    """Split PATHS into inside/outside MODULE. Use '-' to read paths from stdin."""
    candidates = list(paths)
    if candidates == ["-"]:
        candidates = click.get_text_stream("stdin").read().splitlines()
    app.emit(ClassifyService(app.workspace).classify(module, candidates))

"""Root CLI group for modgit with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from modgit import __version__
from modgit.commands import register_commands
from modgit.commands._base import ModgitGroup
from modgit.commands._context import AppContext
from modgit.config.settings import ModgitSettings


@click.group(
    cls=ModgitGroup,
    invoke_without_command=True,
    examples="""\
  modgit list
  modgit resolve frontend
  modgit switch frontend --dev
  modgit -C ~/src/monorepo --json plan apps/web""",
)
@click.version_option(version=__version__, prog_name="modgit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-C",
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Repository root (default: nearest directory holding .modgit).",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    root: Path | None,
    config_path: str | None,
) -> None:
    """modgit — work on one module of a monorepo at a time."""
    ctx.ensure_object(dict)
    settings = ModgitSettings.from_cli(
        config_path=config_path,
        root=root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

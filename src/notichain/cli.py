"""Root CLI group for notichain with global flags and command registration."""

from __future__ import annotations

import click

from notichain import __version__
from notichain.commands import register_commands
from notichain.commands._context import AppContext
from notichain.config.settings import NotichainSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="notichain")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only delivered messages.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """notichain — compose notification decorator chains."""
    ctx.ensure_object(dict)
    settings = NotichainSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

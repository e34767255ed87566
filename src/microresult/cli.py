"""Root ``microresult`` CLI group: global flags and settings resolution."""

from __future__ import annotations

from typing import Any

import click

from microresult import __version__
from microresult.commands._context import AppContext
from microresult.commands.convert import convert
from microresult.commands.inspect_cmd import inspect_cmd
from microresult.config.settings import CONFIG_FILENAME, MicroResultSettings


@click.group(
    invoke_without_command=True,
    epilog=(
        f"Defaults come from {CONFIG_FILENAME} ([codec] compact/indent) "
        "and MICRORESULT_* env vars."
    ),
)
@click.version_option(version=__version__, prog_name="microresult")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON summary output.")
@click.option("-q", "--quiet", is_flag=True, help="Outcome and status only.")
@click.option("-v", "--verbose", is_flag=True, help="Show error meta and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--wire",
    type=click.Choice(["verbose", "compact"]),
    default=None,
    help="Wire format for encoded output. Overrides [codec] compact.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    wire: str | None,
) -> None:
    """microresult — inspect and convert serialized Result payloads."""
    overrides: dict[str, Any] = {}
    if wire is not None:
        overrides["codec"] = {"compact": wire == "compact"}
    settings = MicroResultSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(inspect_cmd)
cli.add_command(convert)

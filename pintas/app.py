import logging
from pathlib import Path

import typer

from pintas import __version__
from pintas.cli import aliases, output
from pintas.cli.init import init

LOG_FORMAT = "[pintas] %(levelname)s %(message)s"


def _version_callback(value: bool):
    if value:
        typer.echo(f"pintas {__version__}")
        raise typer.Exit()


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="A lightning-fast command alias manager.",
)


@app.callback(context_settings={"help_option_names": ["-h", "--help"]})
def common_options_callback(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Alias file. Defaults to $PINTAS_CONFIG or ./pintas.toml.",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    ),
):
    """Store short names for shell commands in pintas.toml and run them."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    obj = output.init_context(ctx, json_output, quiet_output)
    if config_file is not None:
        obj["config_path"] = config_file


app.command("list")(aliases.list_cmd)
app.command("run", context_settings=aliases.RUN_CONTEXT)(aliases.run)
app.command("add")(aliases.add)
app.command("edit")(aliases.edit)
app.command("remove")(aliases.remove)
app.command("init")(init)


def main() -> None:
    """Entry point for pintas command."""
    try:
        app()
    except SystemExit:
        raise
    except BaseException as e:
        raise SystemExit(1) from e

"""Alias commands: list, run, add, edit, remove."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from pintas import config
from pintas.cli import output
from pintas.cli.errors import error_feedback
from pintas.errors import PintasError
from pintas.lib import shells, store
from pintas.lib.launch import ProcessLauncher, SubprocessLauncher
from pintas.lib.substitute import substitute

logger = logging.getLogger(__name__)

RUN_CONTEXT = {"allow_interspersed_args": False, "ignore_unknown_options": True}


def config_path(ctx: typer.Context) -> Path:
    path = ctx.obj.get("config_path") if ctx.obj else None
    return Path(path) if path else config.default_config_path()


def launcher(ctx: typer.Context) -> ProcessLauncher:
    found = ctx.obj.get("launcher") if ctx.obj else None
    return found or SubprocessLauncher(config.shell_executable())


@error_feedback
def list_cmd(ctx: typer.Context):
    """List aliases, sorted by name."""
    pairs = store.list_aliases(store.load(config_path(ctx)))
    if output.echo_json(dict(pairs), ctx):
        return
    if pairs:
        typer.echo(output.format_aliases(pairs))


@error_feedback
def run(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Alias to run"),
    args: Annotated[
        list[str] | None, typer.Argument(help="Arguments substituted for $1, $2, ...")
    ] = None,
    internal: bool = typer.Option(False, "--internal", hidden=True),
):
    """Run an alias. Its exit code becomes pintas's exit code."""
    path = config_path(ctx)
    if internal:
        try:
            command = store.get_alias(store.load(path), alias)
        except PintasError as e:
            logger.debug("shell hook miss for %r: %s", alias, e)
            raise typer.Exit(shells.NOT_FOUND_STATUS) from e
    else:
        command = store.get_alias(store.load(path), alias)

    code = launcher(ctx).launch(substitute(command, args or []))
    logger.debug("alias %r exited with %d", alias, code)
    raise typer.Exit(code)


def _store_alias(ctx: typer.Context, alias: str, command: str) -> None:
    path = config_path(ctx)
    table = store.load(path)
    replaced = store.set_alias(table, alias, command)
    store.save(path, table)
    verb = "Updated" if replaced else "Added"
    output.echo_text(f"{verb} alias '{alias}'.", ctx)


@error_feedback
def add(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Alias name"),
    command: str = typer.Argument(..., help="Shell command, quoted"),
):
    """Add an alias. An existing alias with the same name is overwritten."""
    _store_alias(ctx, alias, command)


@error_feedback
def edit(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Alias name"),
    command: str = typer.Argument(..., help="New shell command, quoted"),
):
    """Change the command of an alias, creating it if missing."""
    _store_alias(ctx, alias, command)


@error_feedback
def remove(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Alias to remove"),
):
    """Remove an alias."""
    path = config_path(ctx)
    table = store.load(path)
    store.remove_alias(table, alias)
    store.save(path, table)
    output.echo_text(f"Removed alias '{alias}'.", ctx)

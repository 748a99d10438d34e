import json as json_lib

import typer


def init_context(
    ctx: typer.Context,
    json_output: bool = False,
    quiet_output: bool = False,
) -> dict:
    """Initialize CLI context with the standard output flags."""
    if ctx.obj is None or not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj["json_output"] = json_output
    ctx.obj["quiet_output"] = quiet_output
    return ctx.obj


def _flag(ctx: typer.Context, key: str) -> bool:
    return bool(ctx.obj and ctx.obj.get(key))


def echo_json(data, ctx: typer.Context) -> bool:
    """Print data as JSON under --json. Returns whether anything was printed."""
    if _flag(ctx, "json_output"):
        typer.echo(json_lib.dumps(data, indent=2))
        return True
    return False


def echo_text(msg: str, ctx: typer.Context) -> None:
    """Print a confirmation unless --quiet."""
    if not _flag(ctx, "quiet_output"):
        typer.echo(msg)


def format_aliases(pairs: list[tuple[str, str]]) -> str:
    width = max(len(name) for name, _ in pairs)
    return "\n".join(f"{name:<{width}}  {command}" for name, command in pairs)

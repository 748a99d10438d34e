import typer

from pintas import config
from pintas.cli.errors import error_feedback
from pintas.lib import shells


@error_feedback
def init(
    shell: str = typer.Argument(..., help=f"One of: {', '.join(shells.supported_shells())}"),
):
    """Print shell integration so aliases run as bare commands.

    Evaluate the output from your shell's rc file, e.g. eval "$(pintas init bash)".
    """
    typer.echo(shells.emit(shell, config.program_path()), nl=False)

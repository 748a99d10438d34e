"""CLI error handling: turn pintas errors into a message and an exit code."""

from functools import wraps

import typer
from click.exceptions import Exit

from pintas.errors import PintasError, StorageError


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    PintasError subclasses exit with their own exit_code. Anything else that
    slips through is reported on one line instead of a traceback.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit, typer.Exit):
            raise
        except PintasError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(e.exit_code) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(StorageError.exit_code) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper

"""Alias table persistence: pintas.toml load/save and table operations."""

import contextlib
import logging
import os
import tempfile
import tomllib
from pathlib import Path

import tomli_w

from pintas.errors import AliasNotFoundError, InvalidAliasError, ParseError, StorageError

logger = logging.getLogger(__name__)

ALIASES_KEY = "aliases"


def load(path: Path) -> dict[str, str]:
    """Load the alias table from path. A missing file is an empty table."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("no alias file at %s, starting empty", path)
        return {}
    except OSError as e:
        raise StorageError(f"Failed to read '{path}': {e.strerror or e}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ParseError(f"Failed to parse '{path}': {e}") from e

    aliases = data.get(ALIASES_KEY, {})
    if not isinstance(aliases, dict):
        raise ParseError(f"Failed to parse '{path}': '{ALIASES_KEY}' must be a table")
    for name, command in aliases.items():
        if not isinstance(command, str):
            raise ParseError(
                f"Failed to parse '{path}': alias '{name}' must be a string, "
                f"got {type(command).__name__}"
            )

    logger.debug("loaded %d aliases from %s", len(aliases), path)
    return dict(aliases)


def save(path: Path, table: dict[str, str]) -> None:
    """Write the full table to path, replacing the previous file atomically."""
    path = Path(path)
    content = tomli_w.dumps({ALIASES_KEY: dict(sorted(table.items()))})

    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as e:
        raise StorageError(f"Failed to write to '{path}': {e.strerror or e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        mode = path.stat().st_mode & 0o777 if path.exists() else 0o644
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError as e:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise StorageError(f"Failed to write to '{path}': {e.strerror or e}") from e

    logger.debug("saved %d aliases to %s", len(table), path)


def validate_name(name: str) -> None:
    if not name:
        raise InvalidAliasError("Alias name cannot be empty.")
    if any(c.isspace() for c in name):
        raise InvalidAliasError(f"Alias name '{name}' cannot contain whitespace.")
    if name.startswith("-"):
        raise InvalidAliasError(f"Alias name '{name}' cannot start with '-'.")


def get_alias(table: dict[str, str], name: str) -> str:
    try:
        return table[name]
    except KeyError:
        raise AliasNotFoundError(name) from None


def set_alias(table: dict[str, str], name: str, command: str) -> bool:
    """Insert or overwrite name. Returns True if an existing entry was replaced."""
    validate_name(name)
    replaced = name in table
    table[name] = command
    return replaced


def remove_alias(table: dict[str, str], name: str) -> str:
    """Delete name and return its command. Absence is an error, not a no-op."""
    try:
        return table.pop(name)
    except KeyError:
        raise AliasNotFoundError(name) from None


def list_aliases(table: dict[str, str]) -> list[tuple[str, str]]:
    return sorted(table.items())

import os
import shutil
import sys
from pathlib import Path

CONFIG_FILENAME = "pintas.toml"
CONFIG_ENV = "PINTAS_CONFIG"
SHELL_ENV = "PINTAS_SHELL"
DEFAULT_SHELL = "/bin/sh"


def default_config_path() -> Path:
    """Return the alias file path: $PINTAS_CONFIG, else pintas.toml in cwd."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.cwd() / CONFIG_FILENAME


def shell_executable() -> str:
    return os.environ.get(SHELL_ENV) or DEFAULT_SHELL


def program_path() -> str:
    """Best absolute path to the pintas executable for shell hooks."""
    found = shutil.which("pintas")
    if found:
        return found
    argv0 = Path(sys.argv[0])
    if argv0.name == "pintas" and argv0.exists():
        return str(argv0.resolve())
    return "pintas"

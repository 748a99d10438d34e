import pytest
from typer.testing import CliRunner

from pintas import config


class FakeLauncher:
    """Records launched commands instead of spawning processes."""

    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.commands: list[str] = []

    def launch(self, command: str) -> int:
        self.commands.append(command)
        return self.exit_code


@pytest.fixture
def workspace(monkeypatch, tmp_path):
    """Isolated working directory with no pintas environment overrides."""
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)
    monkeypatch.delenv(config.SHELL_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config_file(workspace):
    return workspace / config.CONFIG_FILENAME


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def runner():
    return CliRunner()

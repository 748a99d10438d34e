"""Process launching for alias execution."""

import contextlib
import logging
import signal
import subprocess
from typing import Protocol

from pintas.errors import LaunchError

logger = logging.getLogger(__name__)

INTERRUPT_SIGNALS = (signal.SIGINT, signal.SIGQUIT)


class ProcessLauncher(Protocol):
    def launch(self, command: str) -> int:
        """Run command through a shell and return its exit code."""
        ...


class SubprocessLauncher:
    """Run commands with `<shell> -c`, inheriting stdin, stdout and stderr."""

    def __init__(self, shell: str = "/bin/sh"):
        self.shell = shell

    def launch(self, command: str) -> int:
        logger.debug("launching via %s: %s", self.shell, command)
        with interrupts_deferred_to_child():
            try:
                process = subprocess.Popen([self.shell, "-c", command])
            except OSError as e:
                raise LaunchError(f"Failed to execute command with '{self.shell}': {e}") from e
            returncode = process.wait()
        return exit_status(returncode)


def _interrupt_in_parent(signum, frame):
    logger.debug("signal %d left to the child", signum)


@contextlib.contextmanager
def interrupts_deferred_to_child():
    """Let the child alone decide what Ctrl-C and Ctrl-\\ do while it runs.

    The parent gets a no-op handler rather than SIG_IGN: ignored dispositions
    survive exec, handled ones are reset to default in the child.
    """
    previous = {
        signum: signal.signal(signum, _interrupt_in_parent) for signum in INTERRUPT_SIGNALS
    }
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a shell-style exit status."""
    if returncode < 0:
        return 128 - returncode
    return returncode

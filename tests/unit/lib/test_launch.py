import signal
from unittest.mock import patch

import pytest

from pintas.errors import LaunchError
from pintas.lib.launch import SubprocessLauncher, exit_status, interrupts_deferred_to_child


def test_launch_runs_through_shell():
    with patch("subprocess.Popen") as mock_popen:
        mock_popen.return_value.wait.return_value = 3
        code = SubprocessLauncher("/bin/bash").launch("echo hi | wc -c")

    assert code == 3
    call_args, call_kwargs = mock_popen.call_args
    assert call_args[0] == ["/bin/bash", "-c", "echo hi | wc -c"]
    assert "stdout" not in call_kwargs
    assert "stdin" not in call_kwargs


def test_launch_missing_shell_raises():
    before = signal.getsignal(signal.SIGINT)
    with (
        patch("subprocess.Popen", side_effect=FileNotFoundError(2, "No such file")),
        pytest.raises(LaunchError, match="/no/such/sh"),
    ):
        SubprocessLauncher("/no/such/sh").launch("true")
    assert signal.getsignal(signal.SIGINT) is before


def test_exit_status_for_signals():
    assert exit_status(0) == 0
    assert exit_status(7) == 7
    assert exit_status(-2) == 130
    assert exit_status(-9) == 137


def test_real_shell_exit_code():
    assert SubprocessLauncher().launch("exit 5") == 5


def test_interrupt_goes_to_child_not_parent():
    code = SubprocessLauncher().launch("trap 'exit 7' INT; kill -INT $PPID; sleep 1; exit 5")
    assert code == 5


def test_child_trap_decides_exit_code():
    code = SubprocessLauncher().launch("trap 'exit 7' INT; kill -INT $PPID; kill -INT $$; exit 5")
    assert code == 7


def test_child_keeps_default_interrupt_disposition():
    assert SubprocessLauncher().launch("kill -INT $$; exit 0") == 130


def test_handlers_restored_after_launch():
    before = {signum: signal.getsignal(signum) for signum in (signal.SIGINT, signal.SIGQUIT)}
    SubprocessLauncher().launch("exit 0")
    after = {signum: signal.getsignal(signum) for signum in (signal.SIGINT, signal.SIGQUIT)}
    assert after == before


def test_handlers_restored_on_error():
    before = signal.getsignal(signal.SIGINT)
    with pytest.raises(RuntimeError), interrupts_deferred_to_child():
        assert signal.getsignal(signal.SIGINT) is not before
        raise RuntimeError("boom")
    assert signal.getsignal(signal.SIGINT) is before

"""Tests for the process boundary (cli/app.py).

The real process streams are captured with ``capsys``; the working
directory is a ``tmp_path`` so nothing depends on where pytest runs.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pytest

from hostcmd.cli import exit_codes
from hostcmd.cli.app import run
from hostcmd.core.command import CommandBase
from hostcmd.core.flags import FlagSet
from hostcmd.core.models import Info
from hostcmd.exceptions import HostCmdError
from hostcmd.infra.context import Context


class _Pwd(CommandBase):
    def info(self) -> Info:
        return Info("pwd", purpose="print the context directory")

    def run(self, ctx: Context) -> None:
        ctx.stdout.write(ctx.dir + "\n")


class _Interrupted(CommandBase):
    def info(self) -> Info:
        return Info("wait")

    def run(self, ctx: Context) -> None:
        raise KeyboardInterrupt


class _BrokenInfo:
    def info(self) -> Info:
        raise HostCmdError("metadata unavailable", hint="reinstall the plugin")

    def init(self, flags: FlagSet, args: Sequence[str]) -> None:
        pass

    def run(self, ctx: Context) -> None:
        pass


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestRun:
    def test_success_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(_Pwd(), [])
        assert exc_info.value.code == exit_codes.SUCCESS
        assert capsys.readouterr().out == os.getcwd() + "\n"

    def test_bad_args_exit_two_with_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(_Pwd(), ["extra"])
        assert exc_info.value.code == exit_codes.INIT_FAILED
        assert "usage: pwd" in capsys.readouterr().err

    def test_reads_sys_argv_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["pwd", "unexpected"])
        with pytest.raises(SystemExit) as exc_info:
            run(_Pwd())
        assert exc_info.value.code == exit_codes.INIT_FAILED

    def test_missing_cwd_exits_two(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _gone() -> str:
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr(os, "getcwd", _gone)
        with pytest.raises(SystemExit) as exc_info:
            run(_Pwd(), [])
        assert exc_info.value.code == exit_codes.INIT_FAILED
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Hint:" in err

    def test_library_error_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(_BrokenInfo(), [])
        assert exc_info.value.code == exit_codes.RUN_FAILED
        err = capsys.readouterr().err
        assert "metadata unavailable" in err
        assert "reinstall the plugin" in err

    def test_keyboard_interrupt_exits_130(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(_Interrupted(), [])
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted by user." in capsys.readouterr().err

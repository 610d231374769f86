"""Process boundary for running a single command as a program.

A tool's console-script entry point builds a fresh command and hands it
to :func:`run`::

    def cli() -> None:
        run(DeployCommand())

:func:`run` creates the default context, drives the command and turns
the returned code into the real process exit status.  It is the only
function in the package that calls :func:`sys.exit`.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NoReturn

from hostcmd.cli import exit_codes
from hostcmd.cli.console import console, print_error
from hostcmd.cli.driver import main
from hostcmd.core.protocols import Command
from hostcmd.exceptions import HostCmdError, WorkingDirectoryError
from hostcmd.infra.context import Context


def run(command: Command, argv: Sequence[str] | None = None) -> NoReturn:
    """Drive *command* against the real process environment and exit.

    Parameters
    ----------
    command:
        A fresh command instance.
    argv:
        Flags and arguments.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        code = main(command, Context.default(), args)
    except WorkingDirectoryError as exc:
        print_error(exc)
        sys.exit(exit_codes.INIT_FAILED)
    except HostCmdError as exc:
        print_error(exc)
        sys.exit(exit_codes.RUN_FAILED)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    sys.exit(code)

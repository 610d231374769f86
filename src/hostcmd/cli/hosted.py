"""Hosted execution: run a command with captured output.

A supervising process that owns the real environment calls
:func:`run_hosted` and relays the captured streams and exit code,
instead of letting the command touch its own stdout and stderr.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from dataclasses import dataclass

from hostcmd.cli.driver import main
from hostcmd.core.protocols import Command
from hostcmd.infra.context import Context


@dataclass(frozen=True, slots=True)
class HostedResult:
    """Outcome of one hosted invocation."""

    code: int
    """Exit code returned by the driver."""

    stdout: str
    """Everything the command wrote to its result stream."""

    stderr: str
    """Everything written to the diagnostic stream, including log lines
    when logging was directed there."""


def run_hosted(command: Command, args: Sequence[str], dir: str) -> HostedResult:
    """Drive *command* in *dir* with in-memory streams.

    Raises
    ------
    ContextError
        When *dir* is not an absolute path.
    """
    stdout = io.StringIO()
    stderr = io.StringIO()
    with Context(dir, stdout, stderr) as ctx:
        code = main(command, ctx, args)
    return HostedResult(code=code, stdout=stdout.getvalue(), stderr=stderr.getvalue())

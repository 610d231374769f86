"""Command driver: init, then run, then an exit code.

This is the only place that translates a command's outcome into a
process exit code.  It never exits the process itself; the caller
(usually :func:`hostcmd.cli.app.run`, or a hosting agent) decides what
to do with the returned code.
"""

from __future__ import annotations

from collections.abc import Sequence

from hostcmd.cli import exit_codes
from hostcmd.cli.usage import print_usage
from hostcmd.core.flags import FlagSet
from hostcmd.core.protocols import Command
from hostcmd.infra.context import Context


def main(command: Command, ctx: Context, args: Sequence[str]) -> int:
    """Initialize *command* from *args*, run it against *ctx*, return an exit code.

    Parameters
    ----------
    command:
        A fresh command instance.
    ctx:
        Context the command acts through; errors go to ``ctx.stderr``.
    args:
        Flags and arguments only, without the command name.

    Returns
    -------
    int
        :data:`~exit_codes.SUCCESS`, :data:`~exit_codes.RUN_FAILED` or
        :data:`~exit_codes.INIT_FAILED`.
    """
    flags = FlagSet(command.info().name)
    try:
        command.init(flags, args)
    except Exception as exc:  # noqa: BLE001
        ctx.stderr.write(f"{exc}\n")
        print_usage(command, flags, ctx.stderr)
        return exit_codes.INIT_FAILED

    try:
        command.run(ctx)
    except Exception as exc:  # noqa: BLE001
        ctx.log.debug("%s command failed: %s", command.info().name, exc)
        ctx.stderr.write(f"{exc}\n")
        return exit_codes.RUN_FAILED

    return exit_codes.SUCCESS

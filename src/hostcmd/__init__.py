"""hostcmd: run command-line operations against an explicit context.

A :class:`~hostcmd.infra.context.Context` stands in for the process's
working directory and output streams, so the same command can run
attached to the real process or *hosted* by a supervising agent that
only collects its output and exit code.
"""

from hostcmd.cli.driver import main
from hostcmd.cli.hosted import HostedResult, run_hosted
from hostcmd.core.command import CommandBase, check_empty
from hostcmd.core.flags import FlagSet
from hostcmd.core.models import Info
from hostcmd.core.protocols import Command
from hostcmd.infra.context import Context
from hostcmd.version import __version__

__all__: list[str] = [
    "Command",
    "CommandBase",
    "Context",
    "FlagSet",
    "HostedResult",
    "Info",
    "__version__",
    "check_empty",
    "main",
    "run_hosted",
]

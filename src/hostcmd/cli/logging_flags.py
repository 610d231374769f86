"""Standard ``--verbose`` / ``--debug`` / ``--log-file`` options."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from hostcmd.core.flags import FlagSet
from hostcmd.infra.context import Context


@dataclass(slots=True)
class LogFlags:
    """Logging options a command can embed and apply before doing work.

    Typical use inside a command::

        def set_flags(self, flags):
            self.log.add_flags(flags)

        def configure(self, namespace):
            self.log.update(namespace)

        def run(self, ctx):
            self.log.start(ctx)
            ...
    """

    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    def add_flags(self, flags: FlagSet) -> None:
        flags.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            default=self.verbose,
            help="if set, log additional messages",
        )
        flags.add_argument(
            "--debug",
            action="store_true",
            default=self.debug,
            help="if set, log debugging messages",
        )
        flags.add_argument(
            "--log-file",
            metavar="PATH",
            default=self.log_file,
            help="path to write log to",
        )

    def update(self, namespace: argparse.Namespace) -> None:
        """Copy parsed option values from *namespace*."""
        self.verbose = namespace.verbose
        self.debug = namespace.debug
        self.log_file = namespace.log_file

    def start(self, ctx: Context) -> None:
        """Configure *ctx*'s log sink from the parsed options.

        Raises
        ------
        LogFileError
            When the log file cannot be opened.
        """
        ctx.init_log(self.verbose, self.debug, self.log_file)

"""Argument-parser handle scoped to one command invocation.

:class:`FlagSet` is an :class:`argparse.ArgumentParser` whose generated
text goes to a settable ``output`` stream rather than straight to
``sys.stderr``, and whose parse errors raise instead of exiting the
process.  ``output`` discards everything by default; the driver swaps
in a real stream only while printing option defaults.
"""

from __future__ import annotations

import argparse
import copy
import io
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any, NoReturn, TextIO

from hostcmd.exceptions import InitializationError


class _DiscardStream(io.TextIOBase):
    """Text sink that accepts and drops everything written to it."""

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        return len(s)


DISCARD: TextIO = _DiscardStream()  # type: ignore[assignment]
"""Shared discard sink; stateless, so safe to share between flag sets."""

USAGE_WIDTH: int = 80
"""Fixed wrap width for option listings, independent of the terminal."""


class DefaultsHelpFormatter(argparse.ArgumentDefaultsHelpFormatter):
    """Show the default of every option, including options without help."""

    def _format_action(self, action: argparse.Action) -> str:
        if not action.help and action.default not in (None, argparse.SUPPRESS):
            action = copy.copy(action)
            action.help = "(default: %(default)s)"
        return super()._format_action(action)


class FlagSet(argparse.ArgumentParser):
    """Per-invocation option parser named after the command."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        kwargs.setdefault("add_help", False)
        kwargs.setdefault("allow_abbrev", False)
        kwargs.setdefault("formatter_class", DefaultsHelpFormatter)
        super().__init__(prog=name, **kwargs)
        self.output: TextIO = DISCARD

    @contextmanager
    def redirected(self, stream: TextIO) -> Iterator[TextIO]:
        """Send parser output to *stream* for the duration of the block."""
        previous = self.output
        self.output = stream
        try:
            yield stream
        finally:
            self.output = previous

    def parse(self, args: Sequence[str]) -> argparse.Namespace:
        """Parse *args*, raising :class:`InitializationError` on bad input."""
        return self.parse_args(list(args))

    def options(self) -> list[argparse.Action]:
        """Return the registered named options, in registration order."""
        return [action for action in self._actions if action.option_strings]

    def print_defaults(self) -> None:
        """Write the option list, with default values, to ``output``."""
        formatter = self.formatter_class(prog=self.prog, width=USAGE_WIDTH)
        formatter.add_arguments(self.options())
        self._print_message(formatter.format_help())

    # -- argparse overrides ---------------------------------------------------

    def _print_message(self, message: str, file: Any = None) -> None:
        if message:
            self.output.write(message)

    def error(self, message: str) -> NoReturn:
        raise InitializationError(message)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            self._print_message(message)
        raise InitializationError(
            message.strip() if message else f"{self.prog}: exited with status {status}"
        )

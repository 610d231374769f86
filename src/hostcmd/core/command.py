"""Helpers for writing commands.

:class:`CommandBase` splits ``init`` into flag registration and
validation of the parsed namespace; most commands only override
:meth:`~CommandBase.info`, :meth:`~CommandBase.set_flags` and
:meth:`~CommandBase.run`.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from hostcmd.core.flags import FlagSet
from hostcmd.core.models import Info
from hostcmd.exceptions import InitializationError

if TYPE_CHECKING:
    from hostcmd.infra.context import Context


def check_empty(args: Sequence[str]) -> None:
    """Raise :class:`InitializationError` if any arguments are left over."""
    if args:
        raise InitializationError(f"unrecognized args: {list(args)!r}")


class CommandBase(ABC):
    """Base class implementing the usual ``init`` flow."""

    @abstractmethod
    def info(self) -> Info:
        ...

    def set_flags(self, flags: FlagSet) -> None:
        """Register options and positionals on *flags*.  Default: none."""

    def configure(self, namespace: argparse.Namespace) -> None:
        """Store and validate parsed values.  Default: accept anything."""

    def init(self, flags: FlagSet, args: Sequence[str]) -> None:
        self.set_flags(flags)
        self.configure(flags.parse(args))

    @abstractmethod
    def run(self, ctx: Context) -> None:
        ...

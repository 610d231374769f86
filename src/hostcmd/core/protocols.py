"""Protocols (interfaces) consumed by the driver.

Any object implementing :class:`Command` structurally can be driven;
no inheritance is required.  :class:`~hostcmd.core.command.CommandBase`
is available for commands that want the common flag-parsing flow.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from hostcmd.core.flags import FlagSet
from hostcmd.core.models import Info

if TYPE_CHECKING:
    from hostcmd.infra.context import Context


class Command(Protocol):
    """Contract for a single command invocation.

    A fresh instance is expected per invocation: ``init`` stores parsed
    state on the instance and ``run`` acts on it.
    """

    def info(self) -> Info:
        """Return the command's name, usage synopsis, purpose and doc."""
        ...  # pragma: no cover

    def init(self, flags: FlagSet, args: Sequence[str]) -> None:
        """Register options on *flags*, parse *args* and validate them.

        Raises
        ------
        Exception
            Any exception is treated as an initialization failure; the
            driver prints its message followed by usage and returns 2.
        """
        ...  # pragma: no cover

    def run(self, ctx: Context) -> None:
        """Perform the command's work through *ctx*.

        Raises
        ------
        Exception
            Any exception is treated as a run failure and mapped to 1.
        """
        ...  # pragma: no cover

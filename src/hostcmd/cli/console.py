"""Rich console for process-level messages.

Command output never goes through here: commands write to their
context's streams.  This console is only used by the process boundary
in :mod:`hostcmd.cli.app` for errors raised before or around the driver.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from hostcmd.exceptions import HostCmdError

console = Console(stderr=True, highlight=False)
"""Console bound to whatever ``sys.stderr`` is at write time."""


def print_error(exc: HostCmdError) -> None:
    """Render *exc* and its hint, if any."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")

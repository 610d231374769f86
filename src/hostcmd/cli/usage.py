"""Usage summary printed when a command rejects its arguments."""

from __future__ import annotations

from typing import TextIO

from hostcmd.core.flags import FlagSet
from hostcmd.core.protocols import Command


def print_usage(command: Command, flags: FlagSet, output: TextIO) -> None:
    """Write usage, purpose, option defaults and doc for *command* to *output*.

    The option section appears only if *flags* has named options
    registered by the time this is called, i.e. after ``init`` ran.
    """
    info = command.info()
    output.write(f"usage: {info.usage()}\n")
    if info.purpose:
        output.write(f"purpose: {info.purpose}\n")
    if flags.options():
        output.write("\noptions:\n")
        with flags.redirected(output):
            flags.print_defaults()
    doc = info.doc.strip()
    if doc:
        output.write(f"\n{doc}\n")

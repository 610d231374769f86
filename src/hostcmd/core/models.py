"""Domain models for hostcmd.

Models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access and simple derived values.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Info:
    """Descriptive metadata for a command, used in usage output."""

    name: str
    """Name the command is invoked by (e.g. ``deploy``)."""

    args: str = ""
    """Synopsis of the arguments following the name (e.g. ``<charm> [<name>]``)."""

    purpose: str = ""
    """One-line summary of what the command does."""

    doc: str = ""
    """Long-form documentation; surrounding whitespace is ignored."""

    def usage(self) -> str:
        """Return the usage line: the name followed by the argument synopsis."""
        if self.args:
            return f"{self.name} {self.args}"
        return self.name

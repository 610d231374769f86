"""Core layer: command metadata, the command protocol and flag parsing.

Rules
-----
* No imports from ``infra`` or ``cli`` at runtime.
* No filesystem access; output only goes to streams handed in.
"""

from hostcmd.core.command import CommandBase, check_empty
from hostcmd.core.flags import DISCARD, FlagSet
from hostcmd.core.models import Info
from hostcmd.core.protocols import Command

__all__: list[str] = [
    "DISCARD",
    "Command",
    "CommandBase",
    "FlagSet",
    "Info",
    "check_empty",
]

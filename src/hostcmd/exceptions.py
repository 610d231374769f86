"""Custom exception hierarchy for hostcmd.

Commands may raise anything from ``init`` and ``run``; the driver maps
*any* exception to an exit code.  The typed errors below exist for
commands and callers that want to be explicit about which phase failed,
and for the environment-level failures raised by the context itself.

Hierarchy
---------
HostCmdError
├── InitializationError
├── CommandRunError
├── ContextError
│   └── WorkingDirectoryError
└── LogFileError
"""

from __future__ import annotations


class HostCmdError(Exception):
    """Base exception for all hostcmd errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command lifecycle ------------------------------------------------------

class InitializationError(HostCmdError):
    """Raised when a command's arguments are malformed or invalid."""


class CommandRunError(HostCmdError):
    """Raised by a command when its run phase fails."""


# --- Environment ------------------------------------------------------------

class ContextError(HostCmdError):
    """Raised when an execution context cannot be constructed."""


class WorkingDirectoryError(ContextError):
    """Raised when the process working directory cannot be determined.

    No context exists to report through at that point, so this is fatal
    for the invocation.
    """


class LogFileError(HostCmdError):
    """Raised when a log file cannot be opened for append."""

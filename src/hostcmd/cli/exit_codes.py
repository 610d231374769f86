"""Exit-code constants returned by the driver and the process boundary.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: both init and run completed without error."""

RUN_FAILED: int = 1
"""Arguments were accepted but the command's run phase failed."""

INIT_FAILED: int = 2
"""Malformed invocation: init rejected the arguments.  Usage was printed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

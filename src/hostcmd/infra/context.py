"""Execution context: where, and to which streams, a command acts.

A :class:`Context` adds a layer of indirection between a command and
its environment.  Commands resolve paths and write output through it
rather than through ``os.getcwd()``, ``sys.stdout`` and ``sys.stderr``,
which lets a supervising agent run them *hosted* and collect their
output and exit code without handing over the real process streams.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from types import TracebackType
from typing import TextIO

from hostcmd.exceptions import ContextError, LogFileError, WorkingDirectoryError
from hostcmd.infra.log_sink import LogSink


@dataclass(frozen=True, slots=True)
class Context:
    """Working directory plus result and diagnostic streams for one invocation."""

    dir: str
    """Absolute directory relative paths are resolved against."""

    stdout: TextIO
    """Stream for normal results."""

    stderr: TextIO
    """Stream for errors and diagnostics."""

    log: LogSink = field(default_factory=LogSink.isolated)
    """Logging destination configured by :meth:`init_log`."""

    def __post_init__(self) -> None:
        if not os.path.isabs(self.dir):
            raise ContextError(f"context directory must be absolute: {self.dir!r}")

    @classmethod
    def default(cls) -> Context:
        """Return a context for non-hosted use: the real cwd, stdout and stderr.

        Raises
        ------
        WorkingDirectoryError
            When the current working directory cannot be determined
            (e.g. it was removed).  Callers must not continue.
        """
        try:
            directory = os.path.abspath(os.getcwd())
        except OSError as exc:
            raise WorkingDirectoryError(
                f"cannot determine working directory: {exc}",
                hint="Change to an existing directory and retry.",
            ) from exc
        return cls(directory, sys.stdout, sys.stderr, LogSink.shared())

    def abs_path(self, path: str) -> str:
        """Return *path* unchanged if absolute, else joined onto :attr:`dir`."""
        if os.path.isabs(path):
            return path
        return os.path.join(self.dir, path)

    def init_log(self, verbose: bool, debug: bool, log_file: str | None = None) -> None:
        """Direct diagnostic logging to a file, to :attr:`stderr`, or nowhere.

        The debug switch is applied first, whichever destination is chosen.

        Raises
        ------
        LogFileError
            When *log_file* cannot be opened for append; the previous
            destination stays in place.
        """
        self.log.set_debug(debug)
        if log_file:
            path = self.abs_path(log_file)
            try:
                self.log.to_file(path)
            except OSError as exc:
                raise LogFileError(
                    f"cannot open log file {path}: {exc.strerror or exc}",
                ) from exc
        elif verbose or debug:
            self.log.to_stream(self.stderr)
        else:
            self.log.clear()

    def close(self) -> None:
        """Release the log destination, closing any log file."""
        self.log.close()

    def __enter__(self) -> Context:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

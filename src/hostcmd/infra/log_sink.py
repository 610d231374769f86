"""Logging destination owned by an execution context.

A :class:`LogSink` wraps one :class:`logging.Logger` and keeps exactly
one handler attached to it: a stream handler, a file handler, or a
:class:`logging.NullHandler` when logging is disabled.  Contexts hold a
sink instead of reaching for a process-wide logger, so hosted
invocations each get their own destination.
"""

from __future__ import annotations

import logging
from typing import TextIO

LOGGER_NAME: str = "hostcmd"
"""Logger shared by every context created with ``Context.default()``."""

_FORMATTER = logging.Formatter("%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")

_shared: LogSink | None = None


class LogSink:
    """Single switchable destination for timestamped diagnostic lines."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger
        self.logger.propagate = False
        self.debug_enabled: bool = False
        self._handler: logging.Handler | None = None
        self._target: TextIO | None = None
        self.logger.setLevel(logging.INFO)
        self._replace(logging.NullHandler(), None)

    @classmethod
    def shared(cls) -> LogSink:
        """Return the process-wide sink bound to the ``hostcmd`` logger."""
        global _shared
        if _shared is None:
            _shared = cls(logging.getLogger(LOGGER_NAME))
        return _shared

    @classmethod
    def isolated(cls, name: str = f"{LOGGER_NAME}.hosted") -> LogSink:
        """Return a sink with a private logger, unknown to ``logging.getLogger``.

        The logger is not registered with the logging manager, so it is
        released together with the context that holds it.
        """
        return cls(logging.Logger(name))

    @property
    def target(self) -> TextIO | None:
        """Stream lines are currently written to, or ``None`` when disabled."""
        return self._target

    def set_debug(self, enabled: bool) -> None:
        self.debug_enabled = enabled
        self.logger.setLevel(logging.DEBUG if enabled else logging.INFO)

    def to_stream(self, stream: TextIO) -> None:
        """Log to *stream*; the sink never closes it."""
        self._replace(logging.StreamHandler(stream), stream)

    def to_file(self, path: str) -> None:
        """Log to *path*, opened for append and created if missing.

        Raises
        ------
        OSError
            When the file cannot be opened.  The current destination is
            left untouched.
        """
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        self._replace(handler, handler.stream)

    def clear(self) -> None:
        """Disable logging, closing any file this sink opened."""
        self._replace(logging.NullHandler(), None)

    close = clear

    def debug(self, msg: str, *args: object) -> None:
        self.logger.debug(msg, *args)

    def info(self, msg: str, *args: object) -> None:
        self.logger.info(msg, *args)

    def _replace(self, handler: logging.Handler, target: TextIO | None) -> None:
        handler.setFormatter(_FORMATTER)
        previous = self._handler
        self.logger.addHandler(handler)
        self._handler = handler
        self._target = target
        if previous is not None:
            self.logger.removeHandler(previous)
            previous.close()

"""Infrastructure layer: process environment and logging adapters.

Rules
-----
* May import from ``core``; never from ``cli``.
* The only layer that touches ``os.getcwd()``, real streams and log files.
"""

from hostcmd.infra.context import Context
from hostcmd.infra.log_sink import LogSink

__all__: list[str] = [
    "Context",
    "LogSink",
]

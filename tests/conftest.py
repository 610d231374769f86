"""Shared pytest fixtures and configuration for the hostcmd test suite.

Guidelines
----------
* Tests never depend on the real working directory; use ``tmp_path``.
* Streams are ``io.StringIO`` so output can be asserted exactly.
* The process-wide ``hostcmd`` sink is reset after every test.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from pathlib import Path

import pytest

from hostcmd.infra.context import Context
from hostcmd.infra.log_sink import LogSink


@pytest.fixture(autouse=True)
def _reset_shared_sink() -> Iterator[None]:
    yield
    sink = LogSink.shared()
    sink.set_debug(False)
    sink.clear()


@pytest.fixture
def ctx(tmp_path: Path) -> Iterator[Context]:
    """Hosted-style context rooted at ``tmp_path`` with in-memory streams."""
    with Context(str(tmp_path), io.StringIO(), io.StringIO()) as context:
        yield context

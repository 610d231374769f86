"""Smoke tests: verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import hostcmd
from hostcmd import __version__
from hostcmd.cli import exit_codes
from hostcmd.exceptions import (
    CommandRunError,
    ContextError,
    HostCmdError,
    InitializationError,
    LogFileError,
    WorkingDirectoryError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicAPI:
    @pytest.mark.parametrize("name", hostcmd.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert getattr(hostcmd, name) is not None


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InitializationError,
            CommandRunError,
            ContextError,
            WorkingDirectoryError,
            LogFileError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[HostCmdError]
    ) -> None:
        assert issubclass(exc_class, HostCmdError)

    def test_working_directory_error_is_context_error(self) -> None:
        assert issubclass(WorkingDirectoryError, ContextError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(HostCmdError, Exception)

    def test_hint_is_stored(self) -> None:
        err = HostCmdError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = HostCmdError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_run_failed_is_one(self) -> None:
        assert exit_codes.RUN_FAILED == 1

    def test_init_failed_is_two(self) -> None:
        assert exit_codes.INIT_FAILED == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

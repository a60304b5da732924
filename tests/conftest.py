"""Shared pytest fixtures and configuration for the cli-errors test suite.

Guidelines
----------
* No network access in any test; ``sentry_sdk`` is always mocked.
* Platform and architecture are patched, never assumed.
* The pending exit code is module state, so it is reset around every test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from cli_errors.core import exit_status


class RecordingPrinter:
    """Printer that keeps every message instead of showing it."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def print_error_message(self, message: str) -> None:
        self.messages.append(message)


class RecordingReporter:
    """Crash reporter that records calls in order."""

    def __init__(self, *, fail: bool = False) -> None:
        self.calls: list[tuple[str, object]] = []
        self._fail = fail

    def report(self, error: BaseException) -> None:
        self.calls.append(("report", error))
        if self._fail:
            raise ConnectionError("network unreachable")

    def flush(self, timeout_ms: int) -> None:
        self.calls.append(("flush", timeout_ms))


@pytest.fixture(autouse=True)
def _reset_exit_code() -> Iterator[None]:
    exit_status.set_exit_code(None)
    yield
    exit_status.set_exit_code(None)


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    package_logger = logging.getLogger("cli_errors")
    saved = (package_logger.level, package_logger.handlers[:], package_logger.propagate)
    yield
    level, handlers, propagate = saved
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers
    package_logger.propagate = propagate


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DEBUG",
        "SENTRY_DSN",
        "CLI_ERRORS_CLI_NAME",
        "CLI_ERRORS_FLUSH_TIMEOUT_MS",
        "CLI_ERRORS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def printer() -> RecordingPrinter:
    return RecordingPrinter()


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()

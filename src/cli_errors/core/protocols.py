"""Protocols (interfaces) for the collaborators of the error sink.

The handler depends ONLY on these protocols.  Default adapters live in
:mod:`cli_errors.cli.console` and :mod:`cli_errors.infra.sentry_reporter`;
tests substitute their own.
"""

from __future__ import annotations

from typing import Protocol


class Printer(Protocol):
    """Contract for whatever shows error text to the user."""

    def print_error_message(self, message: str) -> None:
        """Display *message*, which may span several lines."""
        ...  # pragma: no cover


class CrashReporter(Protocol):
    """Contract for remote crash-reporting backends.

    Implementations may queue reports and send them in the background;
    :meth:`flush` is the point where the caller waits for delivery.
    """

    def report(self, error: BaseException) -> None:
        """Queue *error* for delivery."""
        ...  # pragma: no cover

    def flush(self, timeout_ms: int) -> None:
        """Block until queued reports are sent or *timeout_ms* elapses.

        Must never wait longer than *timeout_ms*.
        """
        ...  # pragma: no cover

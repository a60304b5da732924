"""Expected-error taxonomy for cli-errors.

An *expected* error is one the user can act on: it is shown without a
stack trace, never reported to crash telemetry, and does not by itself
force a non-zero exit.  Anything else reaching the error sink is
treated as a defect.

Hierarchy
---------
ExpectedError
├── NotLoggedInError
├── InsufficientPrivilegesError
└── MissingDependencyError
"""

from __future__ import annotations

from typing import Any


class ExpectedError(Exception):
    """Base class for errors that should be shown but not reported.

    Parameters
    ----------
    message:
        Text printed to the user.
    hint:
        Optional actionable guidance printed below the message.
    exit_code:
        Optional process exit code requested by the raiser.  ``0``
        means "exit cleanly even though an error was raised".
    """

    def __init__(
        self,
        message: str = "",
        *,
        hint: str | None = None,
        exit_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        self.exit_code: int | None = exit_code


class NotLoggedInError(ExpectedError):
    """Raised when a command needs a session and there is none."""


class InsufficientPrivilegesError(ExpectedError):
    """Raised when the current user may not perform an operation."""


class MissingDependencyError(ExpectedError):
    """Raised when an optional runtime library is not installed."""


def instance_of(err: Any, kind: type) -> bool:
    """A more forgiving :func:`isinstance` for exception classes.

    The same exception class can end up imported twice, e.g. when two
    copies of a package are vendored at different paths.  Instances of
    one copy then fail ``isinstance`` against the other, although they
    are the same error.  Falling back to comparing type names still
    recognises them.

    The name of *err* is its own ``name`` attribute when that is a
    non-empty string, otherwise the name of its class.
    """
    if isinstance(err, kind):
        return True
    name = getattr(err, "name", None)
    if not isinstance(name, str) or not name:
        name = type(err).__name__
    return name == kind.__name__

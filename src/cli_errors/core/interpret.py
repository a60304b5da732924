"""Turn an exception into the text shown to the user.

Rules
-----
* The only side effect is the ``code`` rewrite for native binding
  failures (see :func:`_treat_failed_binding_as_missing_module`).
* No printing, no I/O.
"""

from __future__ import annotations

import errno
import logging
from typing import Any

from cli_errors.config import Settings
from cli_errors.core.messages import MESSAGES

logger = logging.getLogger(__name__)

BINDINGS_FAILURE_PREFIX: str = "Could not locate the bindings file."


def _treat_failed_binding_as_missing_module(error: BaseException) -> None:
    if str(error).startswith(BINDINGS_FAILURE_PREFIX):
        error.code = "MODULE_NOT_FOUND"  # type: ignore[attr-defined]


def error_code(error: BaseException) -> Any:
    """Return the code used to look *error* up in the message table.

    An explicit ``code`` attribute always wins.  Built-in exceptions
    that never carry one are mapped from their type or ``errno``.
    """
    code = getattr(error, "code", None)
    if code is not None:
        return code
    if isinstance(error, ModuleNotFoundError):
        return "MODULE_NOT_FOUND"
    if isinstance(error, OSError):
        name = errno.errorcode.get(error.errno) if error.errno is not None else None
        if name in MESSAGES:
            return name
        if isinstance(error, TimeoutError):
            return "ETIMEDOUT"
    return None


def interpret(error: BaseException, settings: Settings | None = None) -> str:
    """Return a human-readable message for *error*.

    A known code is explained through
    :data:`~cli_errors.core.messages.MESSAGES`; an unknown code is
    prefixed to the error's own message; otherwise the message is
    returned as is.  *settings* defaults to :meth:`Settings.from_env`.
    """
    _treat_failed_binding_as_missing_module(error)
    message = str(error)

    code = error_code(error)
    if code is not None:
        # Only string codes can name a table entry.
        formatter = MESSAGES.get(code) if isinstance(code, str) else None
        explained = (
            formatter(error, settings or Settings.from_env())
            if formatter is not None
            else None
        )
        if explained:
            logger.debug("Interpreted error code %s", code)
            return explained
        if message:
            return f"{code}: {message}"

    return message

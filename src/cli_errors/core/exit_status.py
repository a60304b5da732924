"""The exit code the process will end with.

Python has no equivalent of a settable "pending exit code", so it is
kept here until the outermost boundary calls :func:`sys.exit` with it.
"""

from __future__ import annotations

import math
import re
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_pending: int | None = None


def get_exit_code() -> int | None:
    """Return the pending exit code, or ``None`` if none was set."""
    return _pending


def set_exit_code(code: int | None) -> None:
    global _pending
    _pending = code


def parse_exit_code(raw: Any) -> int | None:
    """Read an integer out of *raw* the lenient way.

    Integers pass through, floats are truncated, and strings yield
    their leading integer (``"42abc"`` gives ``42``).  Anything else
    gives ``None``.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return None
        return int(raw)
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match:
            return int(match.group(1))
    return None


def resolve_exit_code(error: Any) -> int:
    """Work out and store the exit code implied by *error*.

    An ``exit_code`` of exactly ``0`` always wins.  Otherwise a
    non-zero parsed ``exit_code`` is used, then any code already
    pending, then ``1``.
    """
    raw = getattr(error, "exit_code", None)
    if raw is None:
        raw = getattr(error, "exitCode", None)

    if isinstance(raw, int) and not isinstance(raw, bool) and raw == 0:
        code = 0
    else:
        code = parse_exit_code(raw) or _pending or 1
    set_exit_code(code)
    return code

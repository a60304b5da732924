"""Recognise errors from external libraries that are really user errors.

Some dependencies raise plain exceptions for conditions the user caused
(an unknown device name, a missing argument).  They are only
recognisable by their message text, so the patterns below are coupled
to those libraries' wording.  Keep every such pattern here and nowhere
else.
"""

from __future__ import annotations

import re

EXPECTED_MESSAGE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^BalenaApplicationNotFound:"),  # balena-sdk
    re.compile(r"^BalenaDeviceNotFound:"),  # balena-sdk
    re.compile(r"^Missing \w+$"),  # Capitano command line parsing
    re.compile(r"^Unexpected arguments?:"),  # oclif command line parsing
)


def first_line(message: str) -> str:
    """Return *message* up to its first newline."""
    return message.split("\n", 1)[0]


def is_expected_message(message: str) -> bool:
    """Return ``True`` if the first line of *message* matches a known pattern."""
    line = first_line(message)
    return any(pattern.search(line) for pattern in EXPECTED_MESSAGE_PATTERNS)

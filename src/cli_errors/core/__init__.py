"""Core layer — classification and formatting of errors.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
"""

from cli_errors.core.expected import EXPECTED_MESSAGE_PATTERNS, is_expected_message
from cli_errors.core.interpret import interpret
from cli_errors.core.messages import MESSAGES
from cli_errors.core.protocols import CrashReporter, Printer

__all__: list[str] = [
    "EXPECTED_MESSAGE_PATTERNS",
    "MESSAGES",
    "CrashReporter",
    "Printer",
    "interpret",
    "is_expected_message",
]

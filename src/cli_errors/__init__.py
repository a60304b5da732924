"""cli-errors — the last line of defence for a command-line tool.

Turns low-level runtime and OS errors into readable messages, decides
which errors are worth reporting, and settles the process exit code.
"""

from cli_errors.cli.handler import handle_error, run
from cli_errors.core.interpret import interpret
from cli_errors.exceptions import (
    ExpectedError,
    InsufficientPrivilegesError,
    NotLoggedInError,
    instance_of,
)
from cli_errors.version import __version__

__all__: list[str] = [
    "ExpectedError",
    "InsufficientPrivilegesError",
    "NotLoggedInError",
    "__version__",
    "handle_error",
    "instance_of",
    "interpret",
    "run",
]

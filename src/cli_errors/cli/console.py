"""CLI console helpers with optional Rich support.

Rich is imported on first use, not at module level, so that error
output still works when Rich itself is what failed to install.
"""

from __future__ import annotations

import sys
from typing import Any

from cli_errors.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback.

    Also satisfies :class:`~cli_errors.core.protocols.Printer`.
    """

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def print_error_message(self, message: str) -> None:
        """Print *message* in red on stderr, with markup disabled."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(message, file=sys.stderr)
            return
        rich_console.print(
            message, style="red", markup=False, highlight=False, soft_wrap=True,
        )


console = _ConsoleProxy()

"""Allow ``python -m cli_errors`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cli_errors`` behaves identically to the ``cli-errors``
console script.
"""

from __future__ import annotations

from cli_errors.cli.app import cli

if __name__ == "__main__":
    cli()

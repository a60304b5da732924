"""Command line for cli-errors.

Mostly a way to see what users will see: ``cli-errors explain ENOENT
--path /tmp/x`` prints exactly the message the error sink would print
for such an error.
"""

from __future__ import annotations

import argparse

from cli_errors.cli import exit_codes
from cli_errors.cli.console import console
from cli_errors.cli.handler import run
from cli_errors.config import Settings
from cli_errors.core.interpret import interpret
from cli_errors.core.messages import MESSAGES
from cli_errors.exceptions import ExpectedError
from cli_errors.logging_setup import configure_logging
from cli_errors.version import __version__


PATH_CODES: frozenset[str] = frozenset({"EISDIR", "ENOENT"})
"""Codes whose message names the offending path."""


class SyntheticError(Exception):
    """Stand-in for an error raised with a given ``code`` and ``path``."""

    def __init__(self, message: str, *, code: str, path: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.path = path


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli-errors",
        description="Explain the error messages a CLI shows its users.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    explain = subparsers.add_parser(
        "explain", help="Print the message shown for an error code."
    )
    explain.add_argument("code", help="Error code, e.g. ENOENT or EPERM.")
    explain.add_argument(
        "--path",
        default=None,
        help="Path the error refers to. Required for EISDIR and ENOENT.",
    )
    explain.add_argument(
        "--message", default="", help="The error's own message text."
    )

    subparsers.add_parser("codes", help="List the codes with a tailored message.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_explain(
    code: str, path: str | None, message: str, settings: Settings,
) -> int:
    error = SyntheticError(message, code=code, path=path)
    console.print_error_message(interpret(error, settings))
    return exit_codes.SUCCESS


def _handle_codes() -> int:
    for code in MESSAGES:
        console.print(code)
    return exit_codes.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the cli-errors command line.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "explain" and args.code in PATH_CODES and args.path is None:
        parser.error(f"explain {args.code} requires --path")

    settings = Settings.from_env()
    try:
        configure_logging(settings.log_level)
    except ValueError as exc:
        raise ExpectedError(
            str(exc),
            hint="Set CLI_ERRORS_LOG_LEVEL to DEBUG, INFO, WARNING or ERROR.",
        ) from exc

    if args.command == "explain":
        return _handle_explain(args.code, args.path, args.message, settings)
    if args.command == "codes":
        return _handle_codes()

    parser.print_help()
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point; every error goes through the sink."""
    run(main)

"""The error sink: the last stop for every otherwise-uncaught error.

:func:`handle_error` prints a readable message, sets the pending exit
code, and for unexpected errors reports them and terminates the
process.  :func:`run` wraps a console-script entry point so that every
error it raises ends up here.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Callable
from typing import Any, NoReturn

from cli_errors.cli import exit_codes
from cli_errors.cli.console import console
from cli_errors.config import Settings
from cli_errors.core.exit_status import get_exit_code, resolve_exit_code
from cli_errors.core.expected import is_expected_message
from cli_errors.core.interpret import interpret
from cli_errors.core.protocols import CrashReporter, Printer
from cli_errors.exceptions import ExpectedError, instance_of

logger = logging.getLogger(__name__)


def _format_traceback(error: BaseException) -> str:
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).rstrip("\n")


def _default_reporter(settings: Settings) -> CrashReporter:
    from cli_errors.infra.sentry_reporter import SentryCrashReporter

    return SentryCrashReporter(settings.sentry_dsn)


def _report(reporter: CrashReporter, error: BaseException, timeout_ms: int) -> None:
    """Send *error* and wait at most *timeout_ms* for delivery.

    Transport failures are logged and dropped so that they never hide
    the error being reported.
    """
    try:
        reporter.report(error)
        reporter.flush(timeout_ms)
    except Exception:  # noqa: BLE001
        logger.warning("Could not send crash report", exc_info=True)


def handle_error(
    error: Any,
    *,
    printer: Printer | None = None,
    reporter: CrashReporter | None = None,
    settings: Settings | None = None,
    terminate: Callable[[int], Any] | None = None,
) -> int:
    """Print *error*, settle the exit code, and report it if unexpected.

    Parameters
    ----------
    error:
        Anything caught by the outermost boundary.  Values that are not
        exceptions are printed verbatim and treated as benign.
    printer:
        Where the message goes.  Defaults to the Rich stderr console.
    reporter:
        Crash-reporting backend.  Defaults to Sentry, created only when
        an unexpected error actually needs reporting.
    settings:
        Defaults to :meth:`Settings.from_env`.
    terminate:
        Called with the exit code after an unexpected error has been
        reported.  Defaults to :func:`sys.exit`.

    Returns
    -------
    int
        The pending exit code.  Only returned when *terminate* returns
        (the default never does for unexpected errors).
    """
    settings = settings or Settings.from_env()
    printer = printer or console
    code = resolve_exit_code(error)

    if not isinstance(error, BaseException):
        printer.print_error_message(str(error))
        return code

    message = interpret(error, settings)
    lines = [message]
    hint = getattr(error, "hint", None)
    if hint:
        lines.append(f"Hint: {hint}")
    if settings.debug and error.__traceback__ is not None:
        lines.append(_format_traceback(error))
    printer.print_error_message("\n".join(lines))

    if instance_of(error, ExpectedError) or is_expected_message(message):
        logger.debug("Expected %s, exit code %d", type(error).__name__, code)
        return code

    logger.debug("Unexpected %s, reporting", type(error).__name__)
    _report(
        reporter or _default_reporter(settings),
        error,
        settings.flush_timeout_ms,
    )
    (terminate or sys.exit)(code)
    return code


def run(
    entry: Callable[[], int | None],
    *,
    printer: Printer | None = None,
    reporter: CrashReporter | None = None,
    settings: Settings | None = None,
) -> NoReturn:
    """Call *entry* and exit the process with the right code.

    Intended as the body of a console-script function.  ``SystemExit``
    raised by *entry* (e.g. from argparse) passes through untouched.
    When *entry* returns ``None`` the process exits with any code left
    pending by an earlier :func:`handle_error` call.
    """
    try:
        code = entry()
    except KeyboardInterrupt:
        (printer or console).print_error_message("\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        handle_error(exc, printer=printer, reporter=reporter, settings=settings)
        pending = get_exit_code()
        sys.exit(exit_codes.GENERAL_ERROR if pending is None else pending)
    if code is None:
        pending = get_exit_code()
        code = exit_codes.SUCCESS if pending is None else pending
    sys.exit(code)

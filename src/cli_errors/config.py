"""Environment-driven settings for cli-errors.

All knobs are read from environment variables once, by
:meth:`Settings.from_env`, into an immutable value object that callers
pass around explicitly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_CLI_NAME: str = "balena"
DEFAULT_FLUSH_TIMEOUT_MS: int = 1000
DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration for the error sink."""

    debug: bool = False
    """Include the raw traceback in printed error messages."""

    sentry_dsn: str | None = None
    """Crash-reporting endpoint; reporting is a no-op without one."""

    cli_name: str = DEFAULT_CLI_NAME
    """Name of the host command, used in login instructions."""

    flush_timeout_ms: int = DEFAULT_FLUSH_TIMEOUT_MS
    """Upper bound on how long to wait for a crash report to be sent."""

    log_level: str = DEFAULT_LOG_LEVEL
    """Level passed to :func:`~cli_errors.logging_setup.configure_logging`."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        return cls(
            debug=bool(env.get("DEBUG")),
            sentry_dsn=env.get("SENTRY_DSN") or None,
            cli_name=env.get("CLI_ERRORS_CLI_NAME") or DEFAULT_CLI_NAME,
            flush_timeout_ms=_parse_timeout(env.get("CLI_ERRORS_FLUSH_TIMEOUT_MS")),
            log_level=env.get("CLI_ERRORS_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )


def _parse_timeout(raw: str | None) -> int:
    if not raw:
        return DEFAULT_FLUSH_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid flush timeout %r", raw)
        return DEFAULT_FLUSH_TIMEOUT_MS
    if value < 0:
        logger.warning("Ignoring negative flush timeout %r", raw)
        return DEFAULT_FLUSH_TIMEOUT_MS
    return value

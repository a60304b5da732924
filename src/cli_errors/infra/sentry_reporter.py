"""Infrastructure: crash reporting through Sentry.

``sentry_sdk`` is imported lazily, on the first report, so that tools
which never hit an unexpected error do not pay for loading it.
"""

from __future__ import annotations

import logging
from types import ModuleType

from cli_errors.exceptions import MissingDependencyError
from cli_errors.version import __version__

logger = logging.getLogger(__name__)


def _load_sentry_sdk() -> ModuleType:
    """Return the ``sentry_sdk`` module or raise ``MissingDependencyError``."""
    try:
        import sentry_sdk
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "sentry-sdk is not installed. Install with: pip install sentry-sdk",
        ) from exc
    return sentry_sdk


class SentryCrashReporter:
    """:class:`~cli_errors.core.protocols.CrashReporter` backed by ``sentry_sdk``.

    Parameters
    ----------
    dsn:
        Sentry DSN.  When ``None`` the SDK is left uninitialised unless
        the host application initialised it itself, in which case the
        report goes to the host's client.
    release:
        Release tag attached to events.
    """

    def __init__(self, dsn: str | None = None, *, release: str | None = None) -> None:
        self._dsn = dsn
        self._release = release or f"cli-errors@{__version__}"
        self._initialised = False

    def _sdk(self) -> ModuleType:
        sdk = _load_sentry_sdk()
        if self._dsn and not self._initialised:
            sdk.init(dsn=self._dsn, release=self._release)
            self._initialised = True
        return sdk

    def report(self, error: BaseException) -> None:
        event_id = self._sdk().capture_exception(error)
        logger.debug("Queued crash report %s", event_id)

    def flush(self, timeout_ms: int) -> None:
        self._sdk().flush(timeout=timeout_ms / 1000)

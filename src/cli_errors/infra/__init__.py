"""Infrastructure layer — integration with external services.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cli_errors.infra.sentry_reporter import SentryCrashReporter

__all__: list[str] = ["SentryCrashReporter"]

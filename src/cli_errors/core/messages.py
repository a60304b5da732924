"""Human-readable explanations for well-known error codes.

:data:`MESSAGES` maps an OS/runtime error code to a formatter that
receives the error and the active :class:`~cli_errors.config.Settings`
and returns the text shown to the user.  The table
is read-only for the lifetime of the process.
"""

from __future__ import annotations

import platform
import sys
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from cli_errors.config import Settings

Formatter = Callable[[Any, Settings], str]

EXPIRED_TOKEN_CODE: str = "BalenaExpiredToken"

_ARCH_ALIASES: dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
}


def current_arch() -> str:
    """Return the CPU architecture, normalised (``x86_64`` becomes ``x64``)."""
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


def _is_windows() -> bool:
    return sys.platform == "win32"


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def _path(error: Any) -> Any:
    # OSError spells it ``filename``.
    path = getattr(error, "path", None)
    if path is None:
        path = getattr(error, "filename", None)
    return path


def _eisdir(error: Any, settings: Settings) -> str:
    return f"File is a directory: {_path(error)}"


def _enoent(error: Any, settings: Settings) -> str:
    return f"No such file or directory: {_path(error)}"


def _enogit(error: Any, settings: Settings) -> str:
    return "\n".join(
        (
            "Git is not installed on this system.",
            "Head over to http://git-scm.com to install it and run this command again.",
        )
    )


def _eperm(error: Any, settings: Settings) -> str:
    if _is_windows():
        elevate = (
            "Run a new Command Prompt as administrator "
            "and try running this command again."
        )
    else:
        elevate = "Try running this command again prefixing it with `sudo`."
    return "\n".join(
        (
            "You don't have sufficient privileges to run this operation.",
            elevate,
            "",
            "If this is not the case, and you're trying to burn an SDCard, "
            "check that the write lock is not set.",
        )
    )


def _eacces(error: Any, settings: Settings) -> str:
    return MESSAGES["EPERM"](error, settings)


def _etimedout(error: Any, settings: Settings) -> str:
    return "Oops something went wrong, please check your connection and try again."


def _module_not_found(error: Any, settings: Settings) -> str:
    lines = [
        "Part of the CLI could not be loaded. "
        "This typically means your CLI install is in a broken state.",
    ]
    arch = current_arch()
    if arch == "x64":
        lines.append(
            "You can normally fix this by uninstalling and reinstalling the CLI."
        )
    else:
        lines.append(
            f"You're using an unsupported architecture ({arch}), "
            "so this is typically caused by missing native modules."
        )
        lines.append(
            "Reinstalling may help, but pay attention to errors "
            "in native module build steps en route."
        )
    return "\n".join(lines)


def _expired_token(error: Any, settings: Settings) -> str:
    return "\n".join(
        (
            "Looks like your session token is expired.",
            "Please try logging in again with:",
            f"    $ {settings.cli_name} login",
        )
    )


MESSAGES: Mapping[str, Formatter] = MappingProxyType(
    {
        "EISDIR": _eisdir,
        "ENOENT": _enoent,
        "ENOGIT": _enogit,
        "EPERM": _eperm,
        "EACCES": _eacces,
        "ETIMEDOUT": _etimedout,
        "MODULE_NOT_FOUND": _module_not_found,
        EXPIRED_TOKEN_CODE: _expired_token,
    }
)
"""Error code → formatter.  Immutable."""

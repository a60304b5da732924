"""Tests for the error-code message table (core/messages.py).

Platform and architecture are patched — no dependency on the host.

Coverage:
* Path-bearing messages (EISDIR / ENOENT), including OSError ``filename``.
* EPERM wording on Windows vs. elsewhere; EACCES delegation.
* MODULE_NOT_FOUND wording on x64 vs. other architectures.
* Expired session token uses the configured CLI name.
* The table is immutable.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cli_errors.config import Settings
from cli_errors.core.messages import EXPIRED_TOKEN_CODE, MESSAGES, current_arch


class _Err(Exception):
    def __init__(self, message: str = "", **attrs: object) -> None:
        super().__init__(message)
        for key, value in attrs.items():
            setattr(self, key, value)


# ---------------------------------------------------------------------------
# Path messages
# ---------------------------------------------------------------------------

class TestPathMessages:
    def test_eisdir(self) -> None:
        assert MESSAGES["EISDIR"](_Err(path="/srv/data"), Settings()) == (
            "File is a directory: /srv/data"
        )

    def test_enoent(self) -> None:
        assert MESSAGES["ENOENT"](_Err(path="/tmp/x"), Settings()) == (
            "No such file or directory: /tmp/x"
        )

    def test_enoent_uses_oserror_filename(self) -> None:
        err = FileNotFoundError(2, "No such file or directory", "/etc/missing")
        assert MESSAGES["ENOENT"](err, Settings()) == "No such file or directory: /etc/missing"


# ---------------------------------------------------------------------------
# Privileges
# ---------------------------------------------------------------------------

class TestPermissionMessages:
    @patch("cli_errors.core.messages.sys.platform", "win32")
    def test_eperm_windows(self) -> None:
        text = MESSAGES["EPERM"](_Err(), Settings())
        assert "administrator" in text
        assert "sudo" not in text

    @patch("cli_errors.core.messages.sys.platform", "linux")
    def test_eperm_posix(self) -> None:
        text = MESSAGES["EPERM"](_Err(), Settings())
        assert "prefixing it with `sudo`" in text
        assert "administrator" not in text

    @patch("cli_errors.core.messages.sys.platform", "linux")
    def test_eperm_mentions_write_lock(self) -> None:
        lines = MESSAGES["EPERM"](_Err(), Settings()).split("\n")
        assert lines[0] == "You don't have sufficient privileges to run this operation."
        assert lines[2] == ""
        assert "write lock" in lines[3]

    @pytest.mark.parametrize("platform_name", ["win32", "linux", "darwin"])
    def test_eacces_matches_eperm(self, platform_name: str) -> None:
        with patch("cli_errors.core.messages.sys.platform", platform_name):
            assert MESSAGES["EACCES"](_Err(), Settings()) == MESSAGES["EPERM"](_Err(), Settings())


# ---------------------------------------------------------------------------
# Static messages
# ---------------------------------------------------------------------------

class TestStaticMessages:
    def test_enogit_points_to_git_scm(self) -> None:
        text = MESSAGES["ENOGIT"](_Err(), Settings())
        assert text.startswith("Git is not installed on this system.")
        assert "http://git-scm.com" in text

    def test_etimedout(self) -> None:
        assert MESSAGES["ETIMEDOUT"](_Err(), Settings()) == (
            "Oops something went wrong, please check your connection and try again."
        )

    def test_expired_token_default_cli_name(self) -> None:
        text = MESSAGES[EXPIRED_TOKEN_CODE](_Err(), Settings())
        assert "session token is expired" in text
        assert "$ balena login" in text

    def test_expired_token_custom_cli_name(self) -> None:
        text = MESSAGES[EXPIRED_TOKEN_CODE](_Err(), Settings(cli_name="fleet"))
        assert "$ fleet login" in text


# ---------------------------------------------------------------------------
# Architecture
# ---------------------------------------------------------------------------

class TestModuleNotFound:
    @patch("cli_errors.core.messages.platform.machine", return_value="x86_64")
    def test_x64_suggests_reinstall(self, _mock_machine: object) -> None:
        text = MESSAGES["MODULE_NOT_FOUND"](_Err(), Settings())
        assert text.startswith("Part of the CLI could not be loaded.")
        assert "uninstalling and reinstalling" in text
        assert "unsupported architecture" not in text

    @patch("cli_errors.core.messages.platform.machine", return_value="armv7l")
    def test_other_arch_warns_about_native_modules(self, _mock_machine: object) -> None:
        text = MESSAGES["MODULE_NOT_FOUND"](_Err(), Settings())
        assert "unsupported architecture (armv7l)" in text
        assert "native module" in text

    @pytest.mark.parametrize(
        ("machine", "expected"),
        [("x86_64", "x64"), ("AMD64", "x64"), ("aarch64", "arm64"), ("riscv64", "riscv64")],
    )
    def test_current_arch_normalises(self, machine: str, expected: str) -> None:
        with patch("cli_errors.core.messages.platform.machine", return_value=machine):
            assert current_arch() == expected


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

class TestTable:
    def test_codes(self) -> None:
        assert set(MESSAGES) == {
            "EISDIR",
            "ENOENT",
            "ENOGIT",
            "EPERM",
            "EACCES",
            "ETIMEDOUT",
            "MODULE_NOT_FOUND",
            "BalenaExpiredToken",
        }

    def test_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            MESSAGES["EFOO"] = lambda error, settings: "foo"  # type: ignore[index]

"""Tests for the expected-message matcher (core/expected.py)."""

from __future__ import annotations

import pytest

from cli_errors.core.expected import (
    EXPECTED_MESSAGE_PATTERNS,
    first_line,
    is_expected_message,
)


class TestIsExpectedMessage:
    @pytest.mark.parametrize(
        "message",
        [
            "BalenaApplicationNotFound: Application not found: myapp",
            "BalenaDeviceNotFound: Device not found: 7cf02a6",
            "Missing device",
            "Unexpected argument: foo",
            "Unexpected arguments: foo, bar",
        ],
    )
    def test_matches(self, message: str) -> None:
        assert is_expected_message(message) is True

    @pytest.mark.parametrize(
        "message",
        [
            "",
            "Something broke",
            "Error: BalenaDeviceNotFound: nope",
            "Missing two words",
            "Missing device!",
            "Unexpected token",
        ],
    )
    def test_does_not_match(self, message: str) -> None:
        assert is_expected_message(message) is False

    def test_only_first_line_counts(self) -> None:
        assert is_expected_message("Missing device\nTraceback (most recent call last):")
        assert not is_expected_message("Boom\nMissing device")

    def test_four_patterns(self) -> None:
        assert len(EXPECTED_MESSAGE_PATTERNS) == 4


class TestFirstLine:
    def test_single_line(self) -> None:
        assert first_line("one") == "one"

    def test_multi_line(self) -> None:
        assert first_line("one\ntwo\nthree") == "one"

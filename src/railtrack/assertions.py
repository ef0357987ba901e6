"""
Test assertions for Outcome values.

Assert helpers for test suites built on railtrack. A failed assertion
states what was wrong and shows the Outcome it was checking.

Usage in tests:
    from railtrack import OutcomeAssertions

    def test_reads_words():
        outcome = read_words(path)
        words = OutcomeAssertions.assert_success(outcome)
        assert "cloud" in words

    def test_missing_file():
        outcome = read_words(missing)
        OutcomeAssertions.assert_failure_reason_contains(outcome, "not found")
"""

from __future__ import annotations

from typing import Any, TypeVar

from railtrack.outcome import Outcome

T = TypeVar("T")


class OutcomeAssertions:
    """Assertions that print the offending Outcome, on either track."""

    @staticmethod
    def assert_success(outcome: Outcome[T], message: str = "") -> T:
        """
        Assert the Outcome is a Success and return its payload.

            payload = OutcomeAssertions.assert_success(outcome)
        """
        assert outcome.is_success(), _explain("outcome is on the failure track", outcome, message)
        return outcome.unwrap()

    @staticmethod
    def assert_failure(outcome: Outcome[T], message: str = "") -> str:
        """Assert the Outcome is a Failure and return its reason."""
        assert outcome.is_failure(), _explain("outcome is on the success track", outcome, message)
        return outcome.reason()

    @staticmethod
    def assert_failure_reason_contains(outcome: Outcome[T], substring: str) -> None:
        """Case-insensitive substring check on the failure reason."""
        reason = OutcomeAssertions.assert_failure(outcome)
        assert substring.lower() in reason.lower(), _explain(
            f"reason lacks {substring!r}", outcome
        )

    @staticmethod
    def assert_failure_reason_equals(outcome: Outcome[T], expected_reason: str) -> None:
        reason = OutcomeAssertions.assert_failure(outcome)
        assert reason == expected_reason, _explain(f"reason is not {expected_reason!r}", outcome)

    @staticmethod
    def assert_success_value(outcome: Outcome[T], expected_value: Any) -> None:
        payload = OutcomeAssertions.assert_success(outcome)
        assert payload == expected_value, _explain(f"payload is not {expected_value!r}", outcome)


def _explain(problem: str, outcome: Outcome[Any], message: str = "") -> str:
    suffix = f" ({message})" if message else ""
    return f"{problem}: {outcome!r}{suffix}"

"""
Test assertions for Result values.

Expressive assert methods that produce clear failure messages.

Usage in tests:
    from railway import ResultAssertions

    def test_create_user():
        result = validate_required("name", "Alice")
        ResultAssertions.assert_success(result)

    def test_invalid_email():
        result = validate_email("nope")
        ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        ResultAssertions.assert_failure_messages(result, ["Invalid email format"])
"""

from __future__ import annotations

from typing import Any, TypeVar

from railway.failure import ErrorCode
from railway.result import Failure, Result

T = TypeVar("T")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), f"Expected Success but got {result!r}{context}"
        return result.value()

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_code: ErrorCode | None = None,
        message: str = "",
    ) -> Failure[T]:
        """
        Assert the Result is a failure, optionally checking its tag.

            failure = ResultAssertions.assert_failure(result, ErrorCode.NOT_FOUND)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), f"Expected Failure but got {result!r}{context}"
        failure = result.error()
        if expected_code is not None:
            assert failure.code == expected_code, (
                f"Expected error code {expected_code.value} "
                f"but got {failure.code.value}: {failure.error_messages()!r}{context}"
            )
        return failure

    @staticmethod
    def assert_failure_messages(result: Result[T], expected_messages: list[str]) -> None:
        """Assert the failure carries exactly these messages, in this order."""
        assert result.is_failure(), f"Expected Failure but got {result!r}"
        actual = result.error_messages()
        assert actual == expected_messages, (
            f"Expected failure messages {expected_messages!r} but got {actual!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

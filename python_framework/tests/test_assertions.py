"""Tests for ResultAssertions test helper."""

import pytest

from railway import ErrorCode, Result, ResultAssertions


class TestAssertSuccess:
    def test_passes_on_success(self):
        assert ResultAssertions.assert_success(Result.success(42)) == 42

    def test_fails_on_failure_with_clear_message(self):
        result = Result.validation_error("name is required")
        with pytest.raises(AssertionError, match="Expected Success but got ValidationError"):
            ResultAssertions.assert_success(result)

    def test_custom_message(self):
        with pytest.raises(AssertionError, match="custom context"):
            ResultAssertions.assert_success(Result.not_found("x"), "custom context")


class TestAssertFailure:
    def test_passes_on_failure(self):
        failure = ResultAssertions.assert_failure(Result.not_found("missing"))
        assert failure.code == ErrorCode.NOT_FOUND

    def test_checks_error_code(self):
        failure = ResultAssertions.assert_failure(
            Result.validation_error("bad"),
            ErrorCode.VALIDATION_ERROR,
        )
        assert failure.error_messages() == ["bad"]

    def test_fails_on_wrong_error_code(self):
        with pytest.raises(AssertionError, match="Expected error code VALIDATION_ERROR"):
            ResultAssertions.assert_failure(Result.not_found("x"), ErrorCode.VALIDATION_ERROR)

    def test_fails_on_success(self):
        with pytest.raises(AssertionError, match="Expected Failure but got Success"):
            ResultAssertions.assert_failure(Result.success(42))


class TestAssertFailureMessages:
    def test_exact_messages_in_order(self):
        ResultAssertions.assert_failure_messages(
            Result.validation_error("a", "b"), ["a", "b"]
        )

    def test_order_matters(self):
        with pytest.raises(AssertionError, match="Expected failure messages"):
            ResultAssertions.assert_failure_messages(
                Result.validation_error("a", "b"), ["b", "a"]
            )

    def test_fails_on_success(self):
        with pytest.raises(AssertionError, match="Expected Failure"):
            ResultAssertions.assert_failure_messages(Result.success(1), [])


class TestAssertSuccessValue:
    def test_matching_value(self):
        ResultAssertions.assert_success_value(Result.success("ok"), "ok")

    def test_different_value(self):
        with pytest.raises(AssertionError, match="Expected success value"):
            ResultAssertions.assert_success_value(Result.success("ok"), "nope")

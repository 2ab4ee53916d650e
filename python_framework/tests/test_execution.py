"""Tests for ExecutionContext implementations."""

import logging

from railway import (
    ExecutionContext,
    LoggingExecutionContext,
    NoOpExecutionContext,
    Result,
    ServerError,
)


class TestNoOpExecutionContext:
    def test_passthrough(self):
        ctx = NoOpExecutionContext()
        assert ctx.execute(lambda: Result.success(42)).value() == 42

    def test_passthrough_failure(self):
        ctx = NoOpExecutionContext()
        assert ctx.execute(lambda: Result.not_found("gone")).is_failure()

    def test_satisfies_protocol(self):
        assert isinstance(NoOpExecutionContext(), ExecutionContext)


class TestLoggingExecutionContext:
    def test_logs_success(self, caplog):
        ctx = LoggingExecutionContext(operation="TestOp")
        with caplog.at_level(logging.INFO, logger="railway.execution"):
            result = ctx.execute(lambda: Result.success("ok"))
        assert result.value() == "ok"
        assert "TestOp" in caplog.text
        assert "SUCCESS" in caplog.text

    def test_logs_failure_tag(self, caplog):
        ctx = LoggingExecutionContext(operation="TestOp")
        with caplog.at_level(logging.INFO, logger="railway.execution"):
            result = ctx.execute(lambda: Result.unauthorized("No authorization header"))
        assert result.is_failure()
        assert "UNAUTHORIZED" in caplog.text

    def test_returns_failure_unchanged(self):
        failure = Result.validation_error("bad")
        ctx = LoggingExecutionContext(operation="Passthrough")
        assert ctx.execute(lambda: failure) is failure

    def test_catches_exception_as_server_error(self, caplog):
        ctx = LoggingExecutionContext(operation="Boom")

        def failing():
            raise RuntimeError("exploded")

        with caplog.at_level(logging.ERROR, logger="railway.execution"):
            result = ctx.execute(failing)
        assert isinstance(result, ServerError)
        assert result.message == "Execution failed"
        assert "exploded" in caplog.text
        assert isinstance(result.exception, RuntimeError)
        assert "Boom" in caplog.text

    def test_wraps_inner_context(self):
        inner = NoOpExecutionContext()
        ctx = LoggingExecutionContext(inner=inner, operation="Wrapped")
        assert ctx.execute(lambda: Result.success(99)).value() == 99


class TestWithinMethod:
    def test_result_within_context(self):
        assert Result.success(42).within(NoOpExecutionContext()).value() == 42

    def test_pipeline_within_context(self):
        result = (
            Result.success(5)
            .map(lambda x: x * 2)
            .flat_map(lambda x: Result.success(x + 1))
            .within(NoOpExecutionContext())
        )
        assert result.value() == 11

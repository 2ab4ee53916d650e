"""
Execution contexts — separate WHAT (pure logic) from HOW (observability, fault capture).

Core concept:
  - Pure functions describe WHAT should happen → return Result[T]
  - ExecutionContext describes HOW it runs → logging, timing, fault capture
  - They are NEVER mixed

Usage:
    def pipeline(ctx: HttpContext) -> Result[HttpContext]:
        return (
            Result.success(ctx)
            .flat_map(logging_step)
            .flat_map(timing_step)
        )

    outcome = LoggingExecutionContext(operation="middleware").execute(lambda: pipeline(ctx))
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Protocol, TypeVar, runtime_checkable

from railway.result import Result, ServerError

T = TypeVar("T")
logger = logging.getLogger("railway.execution")


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Protocol for execution contexts.

    Any class implementing execute(computation) satisfies this protocol
    via structural typing — no explicit inheritance needed.
    """

    def execute(self, computation: Callable[[], Result[T]]) -> Result[T]:
        """Execute a Result-returning computation within this context."""
        ...


# ──────────────────────── NoOp (Testing) ────────────────────────


class NoOpExecutionContext:
    """
    Passthrough execution context — runs computation without any wrapper.

    Use for unit tests and for pure logic that needs no observability.
    """

    def execute(self, computation: Callable[[], Result[T]]) -> Result[T]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Execution context that logs entry, exit, duration, and track.

    Wraps another context (decorator pattern) to add observability.
    An exception escaping the computation is logged and turned into a
    ServerError, so callers always get a Result back.

        ctx = LoggingExecutionContext(operation="middleware", log_level=logging.DEBUG)
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: int = logging.INFO,
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation
        self._log_level = log_level

    def execute(self, computation: Callable[[], Result[T]]) -> Result[T]:
        logger.log(self._log_level, "[%s] Starting execution", self._operation)
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "[%s] Execution failed after %.3fs: %s",
                self._operation,
                elapsed,
                e,
            )
            return ServerError("Execution failed", e)

        elapsed = time.monotonic() - start
        state = "SUCCESS" if result.is_success() else result.error().code.value
        logger.log(
            self._log_level,
            "[%s] Completed in %.3fs — %s",
            self._operation,
            elapsed,
            state,
        )
        return result

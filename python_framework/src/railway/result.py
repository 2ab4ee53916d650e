"""
Result — the request outcome at the core of Railway-Oriented Programming.

A Result[T] is exactly one of:

  - Success(value: T)                    — the happy path
  - ValidationError(messages: tuple)     — bad input, every problem listed
  - NotFound(message: str)               — missing resource or route
  - Unauthorized(message: str)           — missing or rejected credentials
  - ServerError(message: str, exception) — unexpected fault (fallback)

Every operation returns Result, never throws. Failures propagate automatically
through the failure track via .flat_map() short-circuiting.

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │  logging  │──Success──────│  timing   │──Success──────│   auth   │──→ Result[T]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[T]

Two composition disciplines live side by side:
  - flat_map / bind  — fail-fast, for stepwise pipelines
  - combine          — fail-slow, for independent checks; reports ALL problems
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Optional, TypeVar

from railway.failure import ErrorCode

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Result(Generic[T]):
    """
    Railway-Oriented Programming outcome.

    All transformations short-circuit on failure, so you only write
    the success path and errors propagate automatically.

    Usage:
        >>> result = Result.success(42).map(lambda x: x * 2)
        >>> result.value()
        84

        >>> result = Result.not_found("User not found")
        >>> result.map(lambda x: x * 2).is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is any failure variant."""
        return isinstance(self, Failure)

    def value(self) -> T:
        """
        Extract the success value. Raises ValueError if called on a failure.

        Prefer .either() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure():
                raise ValueError(f"Cannot get value from a failure: {self!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> Failure[T]:
        """
        Return the failure variant itself. Raises ValueError if called on a Success.

            result.error().code  # → ErrorCode.NOT_FOUND
        """
        match self:
            case Failure():
                return self
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error_messages(self) -> list[str]:
        """
        The failure's own messages, in order.

        ValidationError contributes all of its messages; the single-message
        variants contribute one.
        """
        match self:
            case ValidationError(messages):
                return list(messages)
            case NotFound(message) | Unauthorized(message) | ServerError(message):
                return [message]
            case Success(v):
                raise ValueError(f"Cannot get error messages from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[Failure[T]], R],
    ) -> R:
        """
        Apply one of two functions depending on the track.

        This is the fundamental destructor.

            result.either(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda err: f"Error: {err.error_messages()}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure():
                return on_failure(self)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        """
        Transform the success value. Short-circuits on failure.

            Result.success(5).map(lambda x: x * 2)  # → Success(10)
            Result.not_found("x").map(lambda x: x * 2)  # → same NotFound
        """
        match self:
            case Success(v):
                return Success(mapper(v))
        return self  # type: ignore[return-value]

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        This is the KEY operator of ROP — it connects railway segments.
        The failure is returned as the very same object, and `mapper` is
        never evaluated.

            def check(x: int) -> Result[int]:
                if x > 0: return Result.success(x)
                return Result.validation_error("x must be positive")

            Result.success(5).flat_map(check)   # → Success(5)
            Result.success(-1).flat_map(check)  # → ValidationError(...)
        """
        match self:
            case Success(v):
                return mapper(v)
        return self  # type: ignore[return-value]

    def ensure(self, predicate: Callable[[T], bool], failure: Result[T]) -> Result[T]:
        """
        Validate the success value against a condition.
        Short-circuits on existing failure.

            Result.success(user).ensure(
                lambda u: u.id > 0,
                Result.validation_error("id must be positive"),
            )
        """
        return self.flat_map(lambda v: Success(v) if predicate(v) else failure)

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[T], Any]) -> Result[T]:
        """
        Execute a side effect on the success value without altering the Result.

            result.peek(lambda user: log.info("user.created", id=user.id))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[Failure[T]], Any]) -> Result[T]:
        """Execute a side effect on failure without altering the Result."""
        match self:
            case Failure():
                action(self)
        return self

    # ──────────────────────── Extraction ────────────────────────

    def get_or_else(self, default: T) -> T:
        """Extract value or return a default on failure."""
        match self:
            case Success(v):
                return v
            case _:
                return default

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: Any) -> Result[T]:
        """
        Run this Result through an execution context.

            outcome = pipeline(ctx).within(LoggingExecutionContext(operation="middleware"))
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def validation_error(*messages: str) -> Result[Any]:
        """Create a ValidationError carrying every given message, in order."""
        return ValidationError(messages)

    @staticmethod
    def not_found(message: str) -> Result[Any]:
        """Create a NotFound failure."""
        return NotFound(message)

    @staticmethod
    def unauthorized(message: str) -> Result[Any]:
        """Create an Unauthorized failure."""
        return Unauthorized(message)

    @staticmethod
    def server_error(message: str, exception: Optional[BaseException] = None) -> Result[Any]:
        """Create a ServerError failure, optionally keeping the causing exception."""
        return ServerError(message, exception)

    # ──────────────────────── Utility Static Factories ────────────────────────

    @staticmethod
    def from_computation(computation: Callable[[], T], error_message: str) -> Result[T]:
        """
        Create a Result from a computation that may raise.

        Any exception becomes a ServerError carrying it — eliminates
        try/except boilerplate at the edges.

            return Result.from_computation(
                lambda: json.loads(text),
                "Failed to decode body",
            )
        """
        try:
            return Result.success(computation())
        except Exception as e:
            return ServerError(error_message, e)

    @staticmethod
    def from_optional(value: Optional[T], failure: Result[T]) -> Result[T]:
        """
        Create a Result from an Optional value, using `failure` when it is None.

            Result.from_optional(user, Result.not_found("User not found"))
        """
        if value is not None:
            return Result.success(value)
        return failure

    @staticmethod
    def combine(results: Iterable[Result[T]]) -> Result[list[T]]:
        """
        Aggregate independent Results, reporting EVERY problem.

        All successes → Success with the values in input order.
        Otherwise → ValidationError whose messages are the concatenation,
        in input order, of every failure's own messages. Unlike all_of,
        this never stops at the first failure.

            Result.combine([
                validate_required("name", name),
                validate_email(email),
            ])
        """
        values: list[T] = []
        errors: list[str] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure():
                    errors.extend(r.error_messages())
        if errors:
            return ValidationError(errors)
        return Success(values)

    @staticmethod
    def all_of(results: Iterable[Result[T]]) -> Result[list[T]]:
        """
        Collect Results into a Result of list, fail-fast.
        Returns the first failure encountered unchanged, or Success with all values.
        """
        values: list[T] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure():
                    return r  # type: ignore[return-value]
        return Success(values)

    # ──────────────────────── Async Support ────────────────────────

    async def map_async(self, mapper: Callable[[T], Awaitable[U]]) -> Result[U]:
        """
        Async map — apply an async function to the success value.

            result = await Result.success(user_id).map_async(fetch_user)
        """
        match self:
            case Success(v):
                try:
                    return Success(await mapper(v))
                except Exception as e:
                    return ServerError("Async operation failed", e)
        return self  # type: ignore[return-value]

    async def flat_map_async(self, mapper: Callable[[T], Awaitable[Result[U]]]) -> Result[U]:
        """
        Async flat_map — chain an async Result-returning function.

            result = await Result.success(email).flat_map_async(users.find_by_email)
        """
        match self:
            case Success(v):
                try:
                    return await mapper(v)
                except Exception as e:
                    return ServerError("Async operation failed", e)
        return self  # type: ignore[return-value]

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """The success track — wraps a value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("Success value must not be None")
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


class Failure(Result[T]):
    """Base of every failure variant. Never instantiated directly."""

    code: ClassVar[ErrorCode]


@dataclass(frozen=True, slots=True)
class ValidationError(Failure[T]):
    """Input problems — carries every message, in the order they were found."""

    messages: tuple[str, ...]
    code = ErrorCode.VALIDATION_ERROR

    def __post_init__(self) -> None:
        messages = (self.messages,) if isinstance(self.messages, str) else tuple(self.messages)
        object.__setattr__(self, "messages", messages)


@dataclass(frozen=True, slots=True)
class NotFound(Failure[T]):
    """Missing resource or route."""

    message: str
    code = ErrorCode.NOT_FOUND


@dataclass(frozen=True, slots=True)
class Unauthorized(Failure[T]):
    """Missing or rejected credentials."""

    message: str
    code = ErrorCode.UNAUTHORIZED


@dataclass(frozen=True, slots=True)
class ServerError(Failure[T]):
    """Unexpected fault outside the modelled outcomes."""

    message: str
    exception: Optional[BaseException] = field(default=None, compare=False, repr=False)
    code = ErrorCode.SERVER_ERROR


# ──────────────────────── Function forms ────────────────────────


def bind(outcome: Result[T], f: Callable[[T], Result[U]]) -> Result[U]:
    """Function form of Result.flat_map — the sole sequencing primitive."""
    return outcome.flat_map(f)


def combine(outcomes: Sequence[Result[T]]) -> Result[list[T]]:
    """Function form of Result.combine — fail-slow aggregation."""
    return Result.combine(outcomes)

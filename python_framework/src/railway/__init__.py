"""
Railway-Oriented Programming (ROP) outcomes for request pipelines.

Explicit, composable, functional error handling — no exceptions in business logic.

    from railway import Result

    def check_age(age: int) -> Result[int]:
        if age < 0:
            return Result.validation_error("age must be non-negative")
        return Result.success(age)

    result = (
        Result.success({"name": "Alice", "age": 30})
        .flat_map(lambda d: check_age(d["age"]))
        .map(lambda age: f"Valid user, age {age}")
    )
"""

from railway.result import (
    Result,
    Success,
    Failure,
    ValidationError,
    NotFound,
    Unauthorized,
    ServerError,
    bind,
    combine,
)
from railway.failure import ErrorCode
from railway.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
)
from railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ValidationError",
    "NotFound",
    "Unauthorized",
    "ServerError",
    "bind",
    "combine",
    "ErrorCode",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ResultAssertions",
]

__version__ = "1.0.0"

"""
HTTP integration — failure→HTTP status mapping and error bodies.

Framework-agnostic: produces plain (body, status) pairs that any web layer
can serialize.

Usage:
    status = HttpStatusMapper.map_error_code(ErrorCode.NOT_FOUND)  # → 404
    body, status = build_response(result, success_status=201)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from railway.failure import ErrorCode
from railway.result import Failure, Result, ValidationError

T = TypeVar("T")


# ──────────────────────── Error Code → HTTP Status Mapping ────────────────────────


class HttpStatusMapper:
    """Maps failure tags to HTTP status codes."""

    _CODE_TO_STATUS: dict[ErrorCode, int] = {
        # Client errors (4xx)
        ErrorCode.VALIDATION_ERROR: 400,
        ErrorCode.UNAUTHORIZED: 401,
        ErrorCode.NOT_FOUND: 404,
        # Server errors (5xx)
        ErrorCode.SERVER_ERROR: 500,
    }

    @classmethod
    def map_error_code(cls, code: ErrorCode) -> int:
        """Map an ErrorCode to an HTTP status code."""
        return cls._CODE_TO_STATUS.get(code, 500)

    @classmethod
    def map_failure(cls, failure: Failure[Any]) -> int:
        """Map a failure variant to an HTTP status code."""
        return cls.map_error_code(failure.code)


# ──────────────────────── Error Response DTO ────────────────────────


@dataclass(frozen=True, slots=True)
class ErrorResponse:
    """
    Error response body.

    A ValidationError lists every message; the other variants carry one:

        {"errors": ["name is required", "Invalid email format"]}
        {"error": "Route not found"}
    """

    messages: tuple[str, ...]
    multiple: bool

    @staticmethod
    def from_failure(failure: Failure[Any]) -> ErrorResponse:
        return ErrorResponse(
            messages=tuple(failure.error_messages()),
            multiple=isinstance(failure, ValidationError),
        )

    def to_dict(self) -> dict[str, Any]:
        if self.multiple:
            return {"errors": list(self.messages)}
        return {"error": self.messages[0] if self.messages else ""}


# ──────────────────────── Generic Response Builder ────────────────────────


def build_response(
    result: Result[T],
    success_status: int = 200,
    success_body: Any = None,
) -> tuple[Any, int]:
    """
    Build a (body, status_code) tuple from a Result.

        body, status = build_response(result, success_status=201)
    """
    return result.either(
        on_success=lambda value: (
            success_body if success_body is not None else value,
            success_status,
        ),
        on_failure=lambda failure: (
            ErrorResponse.from_failure(failure).to_dict(),
            HttpStatusMapper.map_failure(failure),
        ),
    )

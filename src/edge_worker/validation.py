"""
Validation helpers — small checks that return Result instead of raising.

Each helper is pure: value in, Result out. Handlers compose them with
Result.combine when the checks are independent (report every problem) and
with flat_map when a check depends on the previous one (stop at the first).

    Result.combine([
        validate_required("name", payload.get("name")),
        validate_email(payload.get("email")),
    ])
"""

from __future__ import annotations

import json
from typing import Any

from railway.result import Result


def validate_required(field: str, value: Any) -> Result[str]:
    """Fail with '<field> is required' on None, empty or whitespace-only input."""
    if value is None or not str(value).strip():
        return Result.validation_error(f"{field} is required")
    return Result.success(value)


def validate_email(value: Any) -> Result[str]:
    """Shape check only: the value must be a string containing '@'."""
    if not isinstance(value, str) or "@" not in value:
        return Result.validation_error("Invalid email format")
    return Result.success(value)


def validate_positive(field: str, value: Any) -> Result[int | float]:
    """Fail unless `value` is a real number strictly above zero. NaN and bools fail."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value > 0:
        return Result.validation_error(f"{field} must be positive")
    return Result.success(value)


def parse_json_object(text: str) -> Result[dict[str, Any]]:
    """
    Decode a request body that must be a JSON object.

    An empty body is treated as an empty object, so field checks can
    report the individual missing fields.
    """
    if not text.strip():
        return Result.success({})
    try:
        decoded = json.loads(text)
    except ValueError:
        return Result.validation_error("Invalid JSON body")
    if not isinstance(decoded, dict):
        return Result.validation_error("JSON body must be an object")
    return Result.success(decoded)

"""
Error codes — the discriminating tag carried by every failure variant.

Each failure variant of Result (ValidationError, NotFound, Unauthorized,
ServerError) exposes one of these codes as its `code` class attribute, so a
consumer can branch on the tag without importing the variant classes.

Enum members are singletons, so `failure.code is ErrorCode.NOT_FOUND` is a
valid check.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class ErrorCode(Enum):
    """
    Tags for the failure track.

    Organized by the HTTP status they surface as:
    - Client errors (4xx): VALIDATION_ERROR, UNAUTHORIZED, NOT_FOUND
    - Server errors (5xx): SERVER_ERROR
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Missing fields, malformed values, wrong body shape (→ 400)."""

    UNAUTHORIZED = "UNAUTHORIZED"
    """Missing or rejected credentials (→ 401)."""

    NOT_FOUND = "NOT_FOUND"
    """Resource or route doesn't exist (→ 404)."""

    SERVER_ERROR = "SERVER_ERROR"
    """Unexpected fault outside the modelled outcomes (→ 500)."""

"""
Domain models — immutable values flowing through the request pipeline.

HttpRequest is the parsed view of one incoming request, HttpContext is the
snapshot threaded through middleware, and Response is the status/body/headers
triple handed back to the host.

All models are frozen dataclasses. A middleware step that needs a different
context builds a new one with dataclasses.replace — nothing is mutated in place,
so no two requests (or two steps) can observe each other's changes.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import asdict, dataclass, field, replace
from datetime import UTC, datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Any


class HttpMethod(StrEnum):
    """HTTP methods the route table knows about."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


def frozen_map(items: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Return a read-only copy of `items`."""
    return MappingProxyType(dict(items or {}))


async def _empty_body() -> str:
    return ""


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """
    Parsed request.

    Header names are stored lower-cased so lookups are case-insensitive.
    The body is not read eagerly; handlers await `body()` when they need it.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=frozen_map)
    read_body: Callable[[], Awaitable[str]] = field(
        default=_empty_body, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(
            self, "headers", frozen_map({k.lower(): v for k, v in self.headers.items()})
        )

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    async def body(self) -> str:
        """Read the request body as text."""
        return await self.read_body()


@dataclass(frozen=True, slots=True)
class User:
    """A user as exposed by the API."""

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class HttpContext:
    """
    Request-scoped snapshot threaded through the middleware chain.

    `claims` maps claim name to value (keys unique). `response_headers` holds
    headers middleware wants attached to the final response (e.g. CORS).
    Created once per request, never retained across requests.
    """

    request: HttpRequest
    user: User | None = None
    claims: Mapping[str, str] = field(default_factory=frozen_map)
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    response_headers: Mapping[str, str] = field(default_factory=frozen_map)

    def with_user(self, user: User, claims: Mapping[str, str]) -> HttpContext:
        """New context carrying the authenticated user and merged claims."""
        return replace(self, user=user, claims=frozen_map({**self.claims, **claims}))

    def with_start_time(self, start_time: datetime) -> HttpContext:
        return replace(self, start_time=start_time)

    def with_response_headers(self, headers: Mapping[str, str]) -> HttpContext:
        """New context with `headers` merged over the pending response headers."""
        return replace(
            self,
            response_headers=frozen_map({**self.response_headers, **headers}),
        )


@dataclass(frozen=True, slots=True)
class Response:
    """
    Status/body/headers triple returned to the host.

    Header names are lower-cased; keys are unique.
    """

    body: str
    status: int = 200
    headers: Mapping[str, str] = field(default_factory=frozen_map)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "headers", frozen_map({k.lower(): v for k, v in self.headers.items()})
        )

    def with_default_headers(self, headers: Mapping[str, str]) -> Response:
        """Add `headers` without overriding any header the response already sets."""
        merged = {k.lower(): v for k, v in headers.items()}
        merged.update(self.headers)
        return replace(self, headers=merged)

"""
Middleware — context-transforming steps run before the handler.

A middleware is a plain function HttpContext → Result[HttpContext]. It never
mutates the context it receives; it returns a new one on the success track, or
a failure that stops the chain.

compose() sequences steps with bind, so step i+1 only ever sees the context
produced by step i, and the first failure is returned unchanged without
evaluating the remaining steps:

    ctx ──log_request──▶ ctx' ──timing──▶ ctx'' ──cors──▶ ctx''' ──authenticate──▶ Result
                  │                │               │                      │
                  └────────────────┴───────────────┴──────────────────────┴──▶ failure
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

import structlog
from railway.result import Result, bind

from edge_worker.config import AppSettings, CorsSettings
from edge_worker.domain.models import HttpContext, User

log = structlog.get_logger()

type Middleware = Callable[[HttpContext], Result[HttpContext]]

# Stand-in identity until token validation is wired in by the host.
AUTHENTICATED_USER = User(id=1, name="Authenticated User", email="user@example.com")


def compose(steps: Sequence[Middleware]) -> Middleware:
    """
    Build one middleware that runs `steps` in order, stopping at the first failure.

    The composed function keeps no state between calls.
    """
    chain = tuple(steps)

    def composed(ctx: HttpContext) -> Result[HttpContext]:
        outcome: Result[HttpContext] = Result.success(ctx)
        for step in chain:
            outcome = bind(outcome, step)
            if outcome.is_failure():
                return outcome
        return outcome

    return composed


# ─────────────────────── Stock steps ───────────────────────


def log_request(ctx: HttpContext) -> Result[HttpContext]:
    """Emit one log event for the request. Context passes through untouched."""
    log.info("request.received", method=ctx.request.method, path=ctx.request.path)
    return Result.success(ctx)


def timing(ctx: HttpContext) -> Result[HttpContext]:
    """Stamp the context with the time the pipeline started working on it."""
    return Result.success(ctx.with_start_time(datetime.now(UTC)))


def cors_headers(settings: CorsSettings) -> dict[str, str]:
    return {
        "access-control-allow-origin": settings.allow_origin,
        "access-control-allow-methods": settings.allow_methods,
        "access-control-allow-headers": settings.allow_headers,
    }


def cors(settings: CorsSettings) -> Middleware:
    """Middleware that queues the configured CORS headers for the response."""
    headers = cors_headers(settings)

    def apply_cors(ctx: HttpContext) -> Result[HttpContext]:
        return Result.success(ctx.with_response_headers(headers))

    return apply_cors


def authenticate(ctx: HttpContext) -> Result[HttpContext]:
    """
    Require an Authorization header and attach the caller's identity.

    Only presence is checked; validating the token is the host's concern.
    """
    header = (ctx.request.header("authorization") or "").strip()
    if not header:
        return Result.unauthorized("No authorization header")
    scheme = header.split(maxsplit=1)[0]
    return Result.success(
        ctx.with_user(
            AUTHENTICATED_USER,
            {"sub": str(AUTHENTICATED_USER.id), "scheme": scheme},
        )
    )


def build_middleware(settings: AppSettings) -> Middleware:
    """The default chain: logging, timing, CORS, and auth when required."""
    steps: list[Middleware] = [log_request, timing, cors(settings.cors)]
    if settings.require_auth:
        steps.append(authenticate)
    return compose(steps)

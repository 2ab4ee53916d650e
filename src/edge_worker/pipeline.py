"""
Pipeline — one request from raw input to Response.

  raw request
    → HttpRequest            (adapt the host's request)
      → parse_path           (ApiRoute, NotFound when nothing matches)
        → HttpContext        (fresh, request-scoped)
          → middleware       (compose()d chain, may short-circuit)
            → dispatch       (route → handler)
              → handler      (awaited, produces the Response)

A failure anywhere in the middleware chain is mapped straight to its error
response; the handler is never reached. Every request gets exactly one
Response: an exception escaping a handler is logged and answered with a 500.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import structlog
from railway import LoggingExecutionContext
from railway.result import Failure, ServerError, Success

from edge_worker import responses
from edge_worker.config import DEFAULT_GREETING
from edge_worker.domain.models import HttpContext, HttpRequest, Response
from edge_worker.domain.ports import RawRequest, UserDirectory
from edge_worker.handlers import Handler, dispatch
from edge_worker.middleware import Middleware
from edge_worker.routing import parse_path

log = structlog.get_logger()

_MIDDLEWARE_CONTEXT = LoggingExecutionContext(operation="middleware", log_level=logging.DEBUG)


def request_from_raw(raw: RawRequest) -> HttpRequest:
    """Snapshot the host's request. The body stays unread until a handler asks."""
    return HttpRequest(
        method=raw.method,
        path=raw.path,
        headers=dict(raw.headers),
        read_body=raw.body,
    )


async def _run_handler(handler: Handler, ctx: HttpContext) -> Response:
    try:
        return await handler(ctx)
    except Exception as e:
        log.error(
            "handler.unexpected_error",
            method=ctx.request.method,
            path=ctx.request.path,
            error=str(e),
            exc_info=True,
        )
        return responses.from_failure(ServerError("Internal server error", e))


async def handle_request(
    raw: RawRequest,
    middleware: Middleware,
    users: UserDirectory,
    greeting: str = DEFAULT_GREETING,
    failure_headers: Mapping[str, str] | None = None,
) -> Response:
    """
    Run one request through route matching, middleware and its handler.

    Headers queued by middleware (CORS) are added to the handler's response
    unless the handler set them itself. When the middleware chain fails, the
    queued headers are lost with its context, so `failure_headers` are added
    to the error response instead.
    """
    request = request_from_raw(raw)
    route = parse_path(request.method, request.path)
    base_context = HttpContext(request=request)

    outcome = _MIDDLEWARE_CONTEXT.execute(lambda: middleware(base_context))

    match outcome:
        case Success(ctx):
            response = await _run_handler(dispatch(route, users, greeting), ctx)
            return response.with_default_headers(ctx.response_headers)
        case Failure():
            failure = outcome.error()
            log.info(
                "pipeline.middleware_failed",
                method=request.method,
                path=request.path,
                code=failure.code.value,
                messages=failure.error_messages(),
            )
            return responses.from_failure(failure).with_default_headers(failure_headers or {})
    raise TypeError("unreachable")  # pragma: no cover

"""
FastAPI + Uvicorn ASGI host for the worker.

The host owns transport concerns only. A single catch-all route accepts every
method and path, adapts the Starlette request to the RawRequest port, hands it
to the request pipeline, and returns the pipeline's Response unchanged.
Routing, middleware and error mapping all happen inside the pipeline.

Entry point for production: uvicorn edge_worker.asgi:app --host 0.0.0.0 --port 8787
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from functools import partial

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.responses import Response as StarletteResponse

from edge_worker import __version__
from edge_worker.adapters.starlette_request import StarletteRawRequest, to_starlette_response
from edge_worker.adapters.user_directory import InMemoryUserDirectory
from edge_worker.config import AppSettings
from edge_worker.domain.models import HttpMethod, Response
from edge_worker.domain.ports import RawRequest
from edge_worker.main import configure_structlog
from edge_worker.middleware import build_middleware, cors_headers
from edge_worker.pipeline import handle_request

# ─────────────────────── Global State ───────────────────────
# Set during app startup; None until the lifespan has wired the pipeline.

_request_fn: Callable[[RawRequest], Awaitable[Response]] | None = None
log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    FastAPI lifespan context manager — runs on startup and shutdown.

    Startup: load settings, configure logging, wire the request pipeline.
    Shutdown: drop the pipeline so late requests get 503.
    """
    global _request_fn

    log.info("asgi.startup", phase="lifespan_startup")

    try:
        settings = AppSettings()
    except Exception as e:
        log.error("asgi.startup_error", error=f"Configuration error: {e}")
        raise

    configure_structlog(settings.log_level)

    log.info(
        "asgi.startup_config",
        version=__version__,
        log_level=settings.log_level,
        require_auth=settings.require_auth,
        cors_origin=settings.cors.allow_origin,
    )

    _request_fn = partial(
        handle_request,
        middleware=build_middleware(settings),
        users=InMemoryUserDirectory(),
        greeting=settings.greeting,
        failure_headers=cors_headers(settings.cors),
    )

    log.info("asgi.startup_complete")

    yield  # ← App is running here; Uvicorn handles requests

    _request_fn = None
    log.info("asgi.shutdown_complete")


# ─────────────────────── FastAPI Application ───────────────────────

app = FastAPI(
    title="edge-worker",
    description="Edge worker request pipeline — typed routing, railway middleware, handlers",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.api_route("/{full_path:path}", methods=[method.value for method in HttpMethod])
async def worker(request: Request, full_path: str) -> StarletteResponse:
    """
    Forward every request to the pipeline.

    Returns 503 if the pipeline has not been wired yet (startup incomplete).
    """
    if _request_fn is None:
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "reason": "Pipeline not initialized"},
        )

    response = await _request_fn(StarletteRawRequest(request))
    return to_starlette_response(response)


if __name__ == "__main__":
    # For local testing: python -m uvicorn edge_worker.asgi:app --reload
    import uvicorn

    uvicorn.run(
        "edge_worker.asgi:app",
        host="0.0.0.0",
        port=8787,
        reload=False,
        log_level="info",
    )

"""
Application entry point — configures logging and starts the ASGI server.

Responsibilities:
  1. Configure structlog for structured logging
  2. Load and validate configuration from environment
  3. Serve edge_worker.asgi:app with Uvicorn

The request pipeline itself is wired in the ASGI lifespan (see asgi.py), so
`uvicorn edge_worker.asgi:app` and the `edge-worker` console script behave the
same.
"""

from __future__ import annotations

import logging
import sys

import structlog
import uvicorn

from edge_worker import __version__
from edge_worker.config import AppSettings


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for structured, human-readable console output.

    Unknown level names fall back to INFO.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def main() -> None:
    """Load settings and serve the worker until interrupted."""
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    log.info(
        "app.starting",
        version=__version__,
        log_level=settings.log_level,
        host=settings.server.host,
        port=settings.server.port,
        require_auth=settings.require_auth,
    )

    uvicorn.run(
        "edge_worker.asgi:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""
Starlette adapter — implements the RawRequest port over a Starlette request
and turns the pipeline's Response back into a Starlette response.

This is the only module that knows about the ASGI framework's request and
response types; everything behind it works on the domain models.
"""

from __future__ import annotations

from collections.abc import Mapping

from starlette.requests import Request
from starlette.responses import Response as StarletteResponse

from edge_worker.domain.models import Response


class StarletteRawRequest:
    """RawRequest over a Starlette/FastAPI request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def method(self) -> str:
        return self._request.method

    @property
    def path(self) -> str:
        return self._request.url.path

    @property
    def headers(self) -> Mapping[str, str]:
        # Starlette exposes header names lower-cased; repeated headers keep the last value.
        return dict(self._request.headers.items())

    async def body(self) -> str:
        raw = await self._request.body()
        return raw.decode("utf-8", errors="replace")


def to_starlette_response(response: Response) -> StarletteResponse:
    """Hand the status/body/headers triple to Starlette unchanged."""
    return StarletteResponse(
        content=response.body,
        status_code=response.status,
        headers=dict(response.headers),
    )

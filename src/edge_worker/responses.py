"""
Response construction — the status/body/headers triples the worker returns.

Every JSON body gets `content-type: application/json`; plain bodies get
`text/plain`. `from_result` is the terminal point of a Railway chain: it turns
any Result into a concrete Response, using railway.http_support for the
failure → status/body mapping.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from railway.http_support import ErrorResponse, HttpStatusMapper
from railway.result import Failure, Result

from edge_worker.domain.models import Response

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def dumps(payload: Any) -> str:
    """Compact JSON, the only serialization the worker emits."""
    return json.dumps(payload, separators=(",", ":"), default=str)


def text(body: str, status: int = 200) -> Response:
    return Response(body=body, status=status, headers={"content-type": TEXT_CONTENT_TYPE})


def json_response(payload: Any, status: int = 200) -> Response:
    return Response(body=dumps(payload), status=status, headers={"content-type": JSON_CONTENT_TYPE})


def ok(body: str) -> Response:
    return text(body, 200)


def not_found(message: str) -> Response:
    return json_response({"error": message}, 404)


def from_failure(failure: Failure[Any]) -> Response:
    """
    Map a failure variant to its fixed status and body.

    ValidationError → 400 {"errors": [...]}
    NotFound        → 404 {"error": ...}
    Unauthorized    → 401 {"error": ...}
    ServerError     → 500 {"error": ...}
    """
    return json_response(
        ErrorResponse.from_failure(failure).to_dict(),
        HttpStatusMapper.map_failure(failure),
    )


def from_result(result: Result[T], on_success: Callable[[T], Response]) -> Response:
    """Terminal step of a handler's chain: Success goes through `on_success`."""
    return result.either(on_success, from_failure)

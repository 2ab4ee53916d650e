"""
Handlers and handler dispatch.

dispatch() is a total mapping from every ApiRoute variant to a Handler, an
async function HttpContext → Response. Each handler runs its own Railway chain
(body decoding, validation, lookups) and converts the outcome to a Response
itself via responses.from_result, so a handler's return value is always a
concrete, fully-resolved response.

Route variants without an implementation map to a fixed placeholder that
answers 200 "<operation> not implemented". That is the intended behaviour for
those routes, not an error.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from functools import partial
from typing import Any, assert_never

from railway.result import Result

from edge_worker import responses
from edge_worker.config import DEFAULT_GREETING
from edge_worker.domain.models import HttpContext, Response
from edge_worker.domain.ports import UserDirectory
from edge_worker.domain.routes import (
    AllProducts,
    AllUsers,
    ApiRoute,
    CreateUser,
    Health,
    Home,
    NotFound,
    ProductById,
    ProductByRef,
    Products,
    ProductsRoute,
    SearchProducts,
    UpdateUser,
    UserByEmail,
    UserById,
    Users,
    UsersRoute,
)
from edge_worker.validation import parse_json_object, validate_email, validate_required

type Handler = Callable[[HttpContext], Awaitable[Response]]


# ─────────────────────── Handlers ───────────────────────


async def home(ctx: HttpContext, *, greeting: str = DEFAULT_GREETING) -> Response:
    return responses.ok(greeting)


async def health(ctx: HttpContext) -> Response:
    """Liveness report: status, current time, seconds since the request started."""
    now = datetime.now(UTC)
    return responses.json_response(
        {
            "status": "healthy",
            "timestamp": now.isoformat(),
            "uptime": (now - ctx.start_time).total_seconds(),
            "user": ctx.user.name if ctx.user is not None else None,
        }
    )


async def get_all_users(ctx: HttpContext, *, users: UserDirectory) -> Response:
    result = await users.list_users()
    return responses.from_result(
        result, lambda found: responses.json_response([u.to_dict() for u in found])
    )


async def get_user_by_email(ctx: HttpContext, *, email: str, users: UserDirectory) -> Response:
    result = await users.find_by_email(email)
    return responses.from_result(result, lambda user: responses.json_response(user.to_dict()))


def _validate_new_user(payload: dict[str, Any]) -> Result[list[Any]]:
    """Independent field checks: every problem is reported, not just the first."""
    return Result.combine(
        [
            validate_required("name", payload.get("name")),
            validate_email(payload.get("email")),
        ]
    )


async def create_user(ctx: HttpContext, *, users: UserDirectory) -> Response:
    """
    POST /api/users — body must be a JSON object with `name` and `email`.

    Decoding is fail-fast (no point checking fields of an unreadable body);
    the field checks are fail-slow.
    """
    body = await ctx.request.body()
    validated = parse_json_object(body).flat_map(_validate_new_user)
    created = await validated.flat_map_async(
        lambda fields: users.create_user(str(fields[0]), fields[1])
    )
    return responses.from_result(
        created, lambda user: responses.json_response(user.to_dict(), status=201)
    )


def not_implemented(operation: str) -> Handler:
    """Placeholder handler: 200 with '<operation> not implemented'."""

    async def placeholder(ctx: HttpContext) -> Response:
        return responses.ok(f"{operation} not implemented")

    return placeholder


async def route_not_found(ctx: HttpContext) -> Response:
    return responses.not_found("Route not found")


# ─────────────────────── Dispatch ───────────────────────


def _dispatch_users(route: UsersRoute, users: UserDirectory) -> Handler:
    match route:
        case AllUsers():
            return partial(get_all_users, users=users)
        case UserByEmail(email):
            return partial(get_user_by_email, email=email, users=users)
        case CreateUser():
            return partial(create_user, users=users)
        case UserById():
            return not_implemented("User lookup")
        case UpdateUser():
            return not_implemented("Update")
        case _:
            assert_never(route)


def _dispatch_products(route: ProductsRoute) -> Handler:
    match route:
        case AllProducts() | ProductById() | ProductByRef() | SearchProducts():
            return not_implemented("Products")
        case _:
            assert_never(route)


def dispatch(
    route: ApiRoute,
    users: UserDirectory,
    greeting: str = DEFAULT_GREETING,
) -> Handler:
    """Return the handler for `route`. Total: every variant has one."""
    match route:
        case Home():
            return partial(home, greeting=greeting)
        case Health():
            return health
        case Users(users_route):
            return _dispatch_users(users_route, users)
        case Products(products_route):
            return _dispatch_products(products_route)
        case NotFound():
            return route_not_found
        case _:
            assert_never(route)

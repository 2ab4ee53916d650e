"""
Route model — closed tagged unions describing every request the worker understands.

    ApiRoute      = Home | Health | Users(UsersRoute) | Products(ProductsRoute) | NotFound
    UsersRoute    = AllUsers | UserById | UserByEmail | CreateUser | UpdateUser
    ProductsRoute = AllProducts | ProductById | ProductByRef | SearchProducts

Each variant is a frozen dataclass, so equal inputs produce equal route values
and routes can be used with structural pattern matching:

    match route:
        case Users(UserById(user_id)):
            ...

Consumers that switch over these unions end with `assert_never`, so a new
variant without a matching case is reported by the type checker.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

# ─────────────────────── Users ───────────────────────


@dataclass(frozen=True, slots=True)
class AllUsers:
    pass


@dataclass(frozen=True, slots=True)
class UserById:
    user_id: int


@dataclass(frozen=True, slots=True)
class UserByEmail:
    email: str


@dataclass(frozen=True, slots=True)
class CreateUser:
    pass


@dataclass(frozen=True, slots=True)
class UpdateUser:
    user_id: int


type UsersRoute = AllUsers | UserById | UserByEmail | CreateUser | UpdateUser


# ─────────────────────── Products ───────────────────────


@dataclass(frozen=True, slots=True)
class AllProducts:
    pass


@dataclass(frozen=True, slots=True)
class ProductById:
    product_id: int


@dataclass(frozen=True, slots=True)
class ProductByRef:
    ref: UUID


@dataclass(frozen=True, slots=True)
class SearchProducts:
    query: str


type ProductsRoute = AllProducts | ProductById | ProductByRef | SearchProducts


# ─────────────────────── Top level ───────────────────────


@dataclass(frozen=True, slots=True)
class Home:
    pass


@dataclass(frozen=True, slots=True)
class Health:
    pass


@dataclass(frozen=True, slots=True)
class Users:
    route: UsersRoute


@dataclass(frozen=True, slots=True)
class Products:
    route: ProductsRoute


@dataclass(frozen=True, slots=True)
class NotFound:
    """No rule matched. The matcher returns this instead of failing."""


type ApiRoute = Home | Health | Users | Products | NotFound

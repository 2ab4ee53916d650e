"""
Route matcher — (method, path segments) → ApiRoute.

Matching walks an ordered rule table top to bottom; the first rule whose
method and segment pattern both match wins. A pattern element is either a
literal segment or a typed extractor: a small parsing function that returns
the converted value, or None when the segment doesn't convert. A rule only
matches when every extractor succeeds, so `/api/users/abc` never reaches the
integer rule and falls through to the next candidate.

The matcher is total (no match → NotFound) and pure: no state, no I/O, same
input → equal output.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from uuid import UUID

from edge_worker.domain.models import HttpMethod
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
    SearchProducts,
    UpdateUser,
    UserByEmail,
    UserById,
    Users,
)

# ─────────────────────── Typed segment extractors ───────────────────────

_INT_SEGMENT = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UUID_SEGMENT = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def int_segment(segment: str) -> int | None:
    """Base-10 integer within the signed 32-bit range, else None."""
    if not _INT_SEGMENT.fullmatch(segment):
        return None
    value = int(segment)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def uuid_segment(segment: str) -> UUID | None:
    """Canonical hyphenated UUID, else None."""
    if not _UUID_SEGMENT.fullmatch(segment):
        return None
    return UUID(segment)


def email_segment(segment: str) -> str | None:
    """Any segment containing '@'. Deliberately permissive."""
    return segment if "@" in segment else None


def any_segment(segment: str) -> str:
    return segment


type Extractor = Callable[[str], object | None]
type PatternElement = str | Extractor


# ─────────────────────── Rule table ───────────────────────


@dataclass(frozen=True, slots=True)
class Rule:
    """One line of the route table: method, segment pattern, route builder."""

    method: HttpMethod
    pattern: tuple[PatternElement, ...]
    build: Callable[..., ApiRoute]

    def match(self, method: str, segments: Sequence[str]) -> ApiRoute | None:
        if method != self.method or len(segments) != len(self.pattern):
            return None
        captured: list[object] = []
        for expected, segment in zip(self.pattern, segments, strict=True):
            if isinstance(expected, str):
                if expected != segment:
                    return None
                continue
            value = expected(segment)
            if value is None:
                return None
            captured.append(value)
        return self.build(*captured)


GET, POST, PUT = HttpMethod.GET, HttpMethod.POST, HttpMethod.PUT

RULES: tuple[Rule, ...] = (
    Rule(GET, (), Home),
    Rule(GET, ("health",), Health),
    # Users
    Rule(GET, ("api", "users"), lambda: Users(AllUsers())),
    Rule(GET, ("api", "users", int_segment), lambda user_id: Users(UserById(user_id))),
    Rule(GET, ("api", "users", email_segment), lambda email: Users(UserByEmail(email))),
    Rule(POST, ("api", "users"), lambda: Users(CreateUser())),
    Rule(PUT, ("api", "users", int_segment), lambda user_id: Users(UpdateUser(user_id))),
    # Products
    Rule(GET, ("api", "products"), lambda: Products(AllProducts())),
    Rule(GET, ("api", "products", int_segment), lambda pid: Products(ProductById(pid))),
    Rule(GET, ("api", "products", uuid_segment), lambda ref: Products(ProductByRef(ref))),
    Rule(
        GET,
        ("api", "products", "search", any_segment),
        lambda query: Products(SearchProducts(query)),
    ),
)


# ─────────────────────── Public API ───────────────────────


def split_path(path: str) -> list[str]:
    """
    Split a URL path into its non-empty segments.

    Query string and fragment are ignored; leading, trailing and doubled
    slashes produce no segments, so "/" → [].
    """
    path = path.split("?", 1)[0].split("#", 1)[0]
    return [segment for segment in path.split("/") if segment]


def parse(method: HttpMethod | str, segments: Sequence[str]) -> ApiRoute:
    """
    Resolve (method, segments) to a route. Never fails: unmatched input → NotFound.

    Empty segments are dropped before matching, and the method is compared
    case-insensitively.
    """
    verb = str(method).upper()
    normalized = [segment for segment in segments if segment]
    for rule in RULES:
        route = rule.match(verb, normalized)
        if route is not None:
            return route
    return NotFound()


def parse_path(method: HttpMethod | str, path: str) -> ApiRoute:
    """Convenience: split a raw path and resolve it."""
    return parse(method, split_path(path))

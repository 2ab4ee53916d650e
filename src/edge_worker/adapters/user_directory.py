"""
In-memory user directory — implements the UserDirectory port.

Backed by an immutable tuple of seed users, so concurrent requests share no
mutable state. Every call awaits before answering to behave like a downstream
lookup; `latency` controls how long.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

import structlog
from railway.result import Result

from edge_worker.domain.models import User

log = structlog.get_logger()

SEED_USERS: tuple[User, ...] = (
    User(id=1, name="Alice", email="alice@example.com"),
    User(id=2, name="Bob", email="bob@example.com"),
)


class InMemoryUserDirectory:
    """Read-only directory over a fixed set of users."""

    def __init__(self, users: Iterable[User] = SEED_USERS, latency: float = 0.0) -> None:
        self._users = tuple(users)
        self._latency = latency

    async def list_users(self) -> Result[list[User]]:
        await asyncio.sleep(self._latency)
        return Result.success(list(self._users))

    async def find_by_email(self, email: str) -> Result[User]:
        await asyncio.sleep(self._latency)
        match = next((u for u in self._users if u.email.lower() == email.lower()), None)
        if match is None:
            log.debug("user_directory.miss", email=email)
        return Result.from_optional(match, Result.not_found(f"User not found: {email}"))

    async def create_user(self, name: str, email: str) -> Result[User]:
        """Assign the next free id. The directory itself is left unchanged."""
        await asyncio.sleep(self._latency)
        next_id = max((u.id for u in self._users), default=0) + 1
        user = User(id=next_id, name=name.strip(), email=email.strip())
        log.info("user_directory.created", user_id=user.id)
        return Result.success(user)

"""
Ports — Protocol-based interfaces for the collaborators the pipeline consumes.

These define WHAT the pipeline needs without specifying HOW it's done.
Following hexagonal architecture:

  Domain ← Ports (protocols) ← Adapters (implementations)

Each port is a Protocol (structural typing), so the hosting runtime's request
object or a test double satisfies it simply by having the right members.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from railway.result import Result

from edge_worker.domain.models import User


@runtime_checkable
class RawRequest(Protocol):
    """
    Port: the incoming request as handed over by the hosting runtime.

    `body()` is asynchronous and returns the request body as text.
    """

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    async def body(self) -> str: ...


@runtime_checkable
class UserDirectory(Protocol):
    """
    Port: asynchronous user lookups used by the user handlers.

    Lookups return Result so a missing user travels the failure track
    (NotFound) instead of raising.
    """

    async def list_users(self) -> Result[list[User]]: ...

    async def find_by_email(self, email: str) -> Result[User]: ...

    async def create_user(self, name: str, email: str) -> Result[User]:
        """
        Build the user that would be created for `name`/`email`.

        Persistence is owned outside the worker; implementations only
        assign an id and return the new value.
        """
        ...

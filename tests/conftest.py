"""
Shared test fixtures and helpers for the edge-worker test suite.

Provides a fake raw request (the host-side request shape), a user directory,
settings that ignore the local .env file, and a context factory.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from edge_worker.adapters.user_directory import InMemoryUserDirectory
from edge_worker.config import AppSettings
from edge_worker.domain.models import HttpContext, HttpRequest


@dataclass
class FakeRawRequest:
    """RawRequest double that counts body reads."""

    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    text: str = ""
    body_reads: int = 0

    async def body(self) -> str:
        self.body_reads += 1
        return self.text


@pytest.fixture()
def raw_request() -> Callable[..., FakeRawRequest]:
    """Factory: raw_request("POST", "/api/users", text='{"name": "Al"}')."""

    def _make(
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        text: str = "",
    ) -> FakeRawRequest:
        return FakeRawRequest(method=method, path=path, headers=headers or {}, text=text)

    return _make


@pytest.fixture()
def make_context() -> Callable[..., HttpContext]:
    """Factory for a fresh HttpContext around an HttpRequest."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        text: str = "",
    ) -> HttpContext:
        async def read_body() -> str:
            return text

        request = HttpRequest(
            method=method, path=path, headers=headers or {}, read_body=read_body
        )
        return HttpContext(request=request)

    return _make


@pytest.fixture()
def users() -> InMemoryUserDirectory:
    """The seeded directory: Alice (1) and Bob (2)."""
    return InMemoryUserDirectory()


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    """Default settings, isolated from the developer's environment and .env."""
    for name in ("REQUIRE_AUTH", "GREETING", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return AppSettings(_env_file=None)

"""
Unit tests for the FastAPI ASGI host.

The host forwards every method and path to the request function wired in the
lifespan. These tests use TestClient without entering the lifespan and set
the module-level request function directly.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from edge_worker import asgi
from edge_worker.config import AppSettings
from edge_worker.domain.models import Response
from edge_worker.domain.ports import RawRequest


@pytest.fixture(autouse=True)
def _reset_asgi_state() -> Iterator[None]:
    """Reset ASGI module-level state around each test."""
    asgi._request_fn = None
    yield
    asgi._request_fn = None


@pytest.fixture()
def client() -> TestClient:
    """Create a TestClient without running the lifespan (no real startup)."""
    return TestClient(asgi.app, raise_server_exceptions=False)


class TestNotInitialized:
    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
    def test_returns_503(self, client: TestClient, method: str) -> None:
        """
        GIVEN the application has not completed startup (_request_fn is None)
        WHEN any request arrives
        THEN it returns 503 with an unavailable status.
        """
        response = client.request(method, "/anything")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unavailable"
        assert "not initialized" in body["reason"]


class TestLifespan:
    def test_startup_wires_the_pipeline(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN default settings
        WHEN the app starts through its lifespan
        THEN startup completes, requests reach the pipeline, and shutdown unwires it.
        """
        for name in ("REQUIRE_AUTH", "GREETING"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setitem(AppSettings.model_config, "env_file", None)

        with TestClient(asgi.app) as client:
            assert asgi._request_fn is not None
            response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Hello from the Worker!"
        assert asgi._request_fn is None


class TestForwarding:
    def test_request_reaches_the_pipeline_unchanged(self, client: TestClient) -> None:
        """
        GIVEN a wired request function
        WHEN POST /api/users/7?x=1 arrives with a header and a body
        THEN the function sees method, path, headers and body, and its Response is returned as-is.
        """
        seen: dict[str, object] = {}

        async def fake_pipeline(raw: RawRequest) -> Response:
            seen["method"] = raw.method
            seen["path"] = raw.path
            seen["header"] = raw.headers.get("x-trace")
            seen["body"] = await raw.body()
            return Response(body="teapot", status=418, headers={"X-Custom": "yes"})

        asgi._request_fn = fake_pipeline

        response = client.post("/api/users/7?x=1", headers={"X-Trace": "t1"}, content="héllo")

        assert seen == {"method": "POST", "path": "/api/users/7", "header": "t1", "body": "héllo"}
        assert response.status_code == 418
        assert response.text == "teapot"
        assert response.headers["x-custom"] == "yes"

    def test_root_path_is_forwarded(self, client: TestClient) -> None:
        async def fake_pipeline(raw: RawRequest) -> Response:
            return Response(body=raw.path)

        asgi._request_fn = fake_pipeline

        assert client.get("/").text == "/"

    def test_invalid_utf8_body_is_replaced(self, client: TestClient) -> None:
        async def fake_pipeline(raw: RawRequest) -> Response:
            return Response(body=str(len(await raw.body())))

        asgi._request_fn = fake_pipeline

        assert client.put("/x", content=b"\xff\xfe").status_code == 200

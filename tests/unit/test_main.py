"""
Unit tests for the main module — logging setup and the server entry point.

uvicorn.run is patched out; no server is started.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
import structlog

from edge_worker import main as main_module
from edge_worker.main import configure_structlog


class TestConfigureStructlog:
    """Verify structlog configuration function."""

    def test_configure_structlog_sets_log_level(self) -> None:
        """
        GIVEN log_level="WARNING"
        WHEN configure_structlog is called
        THEN structlog is configured (no exception raised).
        """
        configure_structlog("WARNING")
        assert structlog.get_logger() is not None

    def test_configure_structlog_defaults_to_info(self) -> None:
        configure_structlog()
        assert structlog.is_configured()

    def test_unknown_level_falls_back(self) -> None:
        configure_structlog("CHATTY")
        assert structlog.is_configured()


class TestMain:
    def test_serves_asgi_app_with_configured_address(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN SERVER__PORT=9000 and LOG_LEVEL=debug in the environment
        WHEN main() runs
        THEN uvicorn serves edge_worker.asgi:app on that port at debug level.
        """
        monkeypatch.setenv("SERVER__PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        with patch.object(main_module.uvicorn, "run") as run:
            main_module.main()

        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == ("edge_worker.asgi:app",)
        assert kwargs["port"] == 9000
        assert kwargs["log_level"] == "debug"

    def test_invalid_configuration_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVER__PORT", "not-a-port")

        with patch.object(main_module.uvicorn, "run") as run, pytest.raises(SystemExit) as exc:
            main_module.main()

        assert exc.value.code == 1
        run.assert_not_called()

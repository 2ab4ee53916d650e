"""
Unit tests for configuration loading.

Settings are built with _env_file=None so a developer's .env never leaks in;
environment variables are set per test with monkeypatch.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from edge_worker.config import DEFAULT_GREETING, AppSettings


class TestDefaults:
    def test_defaults(self, settings: AppSettings) -> None:
        assert settings.require_auth is False
        assert settings.greeting == DEFAULT_GREETING
        assert settings.log_level == "INFO"
        assert settings.server.host == "0.0.0.0"
        assert settings.server.port == 8787
        assert settings.cors.allow_origin == "*"
        assert settings.cors.allow_methods == "GET, POST, PUT, DELETE, OPTIONS"
        assert settings.cors.allow_headers == "Content-Type, Authorization"


class TestEnvironment:
    def test_flat_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUIRE_AUTH", "true")
        monkeypatch.setenv("GREETING", "Hi")

        settings = AppSettings(_env_file=None)

        assert settings.require_auth is True
        assert settings.greeting == "Hi"

    def test_nested_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN CORS__ALLOW_ORIGIN and SERVER__PORT in the environment
        WHEN settings load
        THEN the nested sub-settings pick them up.
        """
        monkeypatch.setenv("CORS__ALLOW_ORIGIN", "https://app.example.com")
        monkeypatch.setenv("SERVER__PORT", "9000")

        settings = AppSettings(_env_file=None)

        assert settings.cors.allow_origin == "https://app.example.com"
        assert settings.server.port == 9000

    def test_port_out_of_range_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVER__PORT", "70000")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)


class TestLogLevel:
    @pytest.mark.parametrize(
        "raw,expected",
        [("debug", "DEBUG"), (" warning ", "WARNING"), ("ERROR", "ERROR"), ("loud", "INFO")],
    )
    def test_normalized(self, raw: str, expected: str) -> None:
        assert AppSettings(_env_file=None, log_level=raw).log_level == expected

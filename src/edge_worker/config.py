"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables (12-factor app)
  - Fall back to .env file
  - Validate types and constraints at startup

Only AppSettings is a BaseSettings instance. Sub-settings are plain BaseModel
classes populated via env_nested_delimiter="__", so CORS__ALLOW_ORIGIN maps to
cors.allow_origin and SERVER__PORT maps to server.port.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

DEFAULT_GREETING = "Hello from the Worker!"

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class CorsSettings(BaseModel):
    """Values the CORS middleware attaches to every response."""

    allow_origin: str = Field(default="*", description="Access-Control-Allow-Origin")
    allow_methods: str = Field(
        default="GET, POST, PUT, DELETE, OPTIONS",
        description="Access-Control-Allow-Methods",
    )
    allow_headers: str = Field(
        default="Content-Type, Authorization",
        description="Access-Control-Allow-Headers",
    )


class ServerSettings(BaseModel):
    """Where the ASGI host listens."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8787, ge=1, le=65535, description="Bind port")


class AppSettings(BaseSettings):
    """
    Root application settings — aggregates all sub-settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    cors: CorsSettings = Field(default_factory=CorsSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    require_auth: bool = Field(default=False)
    greeting: str = Field(default=DEFAULT_GREETING)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name; anything unrecognised becomes INFO."""
        level = value.strip().upper()
        return level if level in _LOG_LEVELS else "INFO"

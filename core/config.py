# =============================================================================
# core/config.py  —  Process Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the handful of environment variables the system understands into
#   a frozen pydantic-settings object.  It is built ONCE at process start
#   and then handed to whoever needs it (the HTTP client, the agent factory).
#
# ENVIRONMENT VARIABLES:
#   SWAPI_BASE_URL  →  Upstream API root      (default: https://swapi.dev/api)
#   SWAPI_TIMEOUT   →  Per-request timeout, s (default: 10, must be > 0)
#   LOG_LEVEL       →  Server log level       (default: INFO)
#   AGENT_MODEL     →  LiteLlm model string   (default: openrouter/openai/gpt-4o)
#
#   A .env file is loaded by the entry points (main.py, tools/mcp_server.py)
#   BEFORE load_settings() is called, so values there are picked up too.
# =============================================================================

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://swapi.dev/api"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


class Settings(BaseSettings):
    """Immutable process configuration."""

    model_config = SettingsConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    swapi_base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="SWAPI_BASE_URL")
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, validation_alias="SWAPI_TIMEOUT"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    agent_model: str = Field(default=DEFAULT_AGENT_MODEL, validation_alias="AGENT_MODEL")

    @field_validator("swapi_base_url", mode="before")
    @classmethod
    def normalize_base_url(cls, value: Any) -> str:
        """Blank falls back to the public API; trailing slashes are dropped."""
        url = str(value or "").strip() or DEFAULT_BASE_URL
        return url.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        return str(value or "INFO").strip().upper()


def load_settings() -> Settings:
    """Build Settings from the environment.

    Raises:
        pydantic.ValidationError: If SWAPI_TIMEOUT is not a positive number.
    """
    return Settings()

"""blueprinter configuration.

Typed settings for talking to the Waiframe API. Uses a Pydantic v2 model so
values are validated at construction time and can be loaded from the
environment without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field


API_KEY_SETTINGS_URL = "https://waiframe.ai/app/settings?tab=api-keys"


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


class Config(BaseModel):
    """Global blueprinter configuration.

    Instances are typically created once by the CLI entry point and passed to
    the API client.
    """

    api_key: str = Field(default="", description="Waiframe API key (Bearer token)")
    base_url: str = Field(default="https://waiframe.ai")
    cache_ttl: float = Field(
        default=300.0, ge=0, description="Seconds a cached API response stays fresh"
    )
    timeout: float = Field(default=30.0, ge=1, description="Per-request timeout in seconds")

    def require_api_key(self) -> str:
        """Return the API key or raise ``ConfigError`` if it is not set."""
        if not self.api_key:
            raise ConfigError(
                "WAIFRAME_API_KEY environment variable is required. "
                f"Generate one at: {API_KEY_SETTINGS_URL}"
            )
        return self.api_key

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            WAIFRAME_API_KEY, WAIFRAME_BASE_URL, WAIFRAME_CACHE_TTL,
            WAIFRAME_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("WAIFRAME_API_KEY"):
            kwargs["api_key"] = os.environ["WAIFRAME_API_KEY"]
        if os.environ.get("WAIFRAME_BASE_URL"):
            kwargs["base_url"] = os.environ["WAIFRAME_BASE_URL"]
        if os.environ.get("WAIFRAME_CACHE_TTL"):
            kwargs["cache_ttl"] = float(os.environ["WAIFRAME_CACHE_TTL"])
        if os.environ.get("WAIFRAME_TIMEOUT"):
            kwargs["timeout"] = float(os.environ["WAIFRAME_TIMEOUT"])
        return cls(**kwargs)

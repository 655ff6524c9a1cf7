"""Message Center configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the mock API server.

    All env vars are prefixed with ``MESSAGE_CENTER_``.
    Example: ``MESSAGE_CENTER_PORT=3001``
    """

    model_config = SettingsConfigDict(env_prefix="MESSAGE_CENTER_")

    # --- HTTP API -----------------------------------------------------------
    api_prefix: str = Field(
        default="/api",
        description="Path prefix for all message endpoints",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )

    # --- Server -------------------------------------------------------------
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3001, description="Bind port")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(
        default=True,
        description="Use JSON log output (True for prod, False for dev)",
    )


class ClientSettings(BaseSettings):
    """Settings for the client data layer and its UI controllers."""

    model_config = SettingsConfigDict(env_prefix="MESSAGE_CENTER_CLIENT_")

    base_url: str = Field(
        default="http://localhost:3001/api",
        description="Base URL of the message API, including the prefix",
    )
    timeout_seconds: float = Field(default=10.0, description="HTTP request timeout")

    # --- Controllers --------------------------------------------------------
    fetch_cooldown_ms: int = Field(
        default=100,
        description="Minimum gap between two list fetches; faster calls are dropped",
    )
    search_debounce_ms: int = Field(
        default=300,
        description="Quiet period before a search keystroke triggers a fetch",
    )
    scroll_throttle_ms: int = Field(default=200, description="Scroll handler throttle")
    scroll_threshold_px: int = Field(
        default=100,
        description="Distance from the bottom that triggers load-more",
    )
    retry_throttle_ms: int = Field(
        default=1000,
        description="Throttle applied to the manual 'Try Again' refetch",
    )

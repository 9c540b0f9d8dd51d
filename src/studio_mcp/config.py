"""Runtime configuration for Studio MCP."""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOCKET_URL = "ws://127.0.0.1:8765/ws"


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="STUDIO_MCP_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "studio-mcp"
    log_level: str = "INFO"
    log_dir: Path | None = Field(
        default=None,
        description="Directory for daily log files; stderr only when unset.",
    )
    socket_url: str = Field(
        default=DEFAULT_SOCKET_URL,
        validation_alias=AliasChoices("STUDIO_MCP_SOCKET_URL", "KKSTUDIOSOCKET_URL"),
        description="WebSocket address of the KKStudioSocket peer.",
    )
    request_timeout_ms: int = Field(default=5_000, gt=0)
    screenshot_timeout_ms: int = Field(default=15_000, gt=0)
    connection_mode: str = Field(
        default="persistent",
        description="persistent (shared connection under a lock) or per_request.",
    )
    close_timeout_seconds: float = Field(default=2.0, ge=0)


settings = Settings()

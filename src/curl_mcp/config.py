"""Configuration using pydantic-settings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Transport = Literal["stdio", "sse"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="CURL_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    transport: Annotated[Transport, Field(description="MCP transport")] = "stdio"

    server_port: Annotated[int, Field(description="Server port (sse)")] = 8090
    server_host: Annotated[str, Field(description="Server host (sse)")] = "0.0.0.0"

    curl_binary: Annotated[
        str, Field(description="curl executable name or path")
    ] = "curl"

    log_level: Annotated[str, Field(description="Logging level")] = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure and return the application logger.

    Logs go to stderr so the stdio transport keeps stdout for protocol messages.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger = logging.getLogger("curl_mcp")
    logger.setLevel(getattr(logging, settings.log_level.upper()))

    return logger

"""Application configuration using pydantic-settings.

Circle credentials are required; everything else has a development default.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Circle
    # ======================
    circle_api_key: str = Field(..., min_length=1, description="Circle W3S API key")
    circle_secret: str = Field(
        ..., min_length=1, description="Entity secret (hex) registered with Circle"
    )
    circle_base_url: str = Field(
        default="https://api.circle.com", description="Circle API base URL"
    )
    request_timeout: float = Field(
        default=15.0, description="Timeout for Circle API requests in seconds"
    )
    testnet: bool = Field(
        default=True, description="Offer testnet blockchains in the wallet form"
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    local_api_url: Optional[str] = Field(
        default=None,
        description="Base URL the pages fetch the API from (None = in-process)",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "testnet": self.testnet,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "local_api_url": self.local_api_url or "(in-process)",
            "circle": {
                "base_url": self.circle_base_url,
                "api_key": self._redact(self.circle_api_key),
                "entity_secret": "***" if self.circle_secret else "(not set)",
                "timeout": self.request_timeout,
            },
        }

    @staticmethod
    def _redact(value: str) -> str:
        """Keep only the key prefix (e.g. TEST_API_KEY) of a Circle API key."""
        if not value:
            return "(not set)"
        if ":" in value:
            prefix, _ = value.split(":", 1)
            return f"{prefix}:***"
        return "***"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

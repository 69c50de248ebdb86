"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Largest page the relayer is asked for in a single asset-pairs request
MAX_PER_PAGE = 1000


class Settings(BaseSettings):
    """Order provider settings."""

    model_config = SettingsConfigDict(
        env_prefix="SRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = Field(
        default="https://api.radarrelay.com/0x/v2",
        description="Standard Relayer API base URL",
    )
    network_id: int = Field(default=1, description="Ethereum network id sent with every query")
    default_per_page: int = Field(
        default=MAX_PER_PAGE,
        gt=0,
        le=MAX_PER_PAGE,
        description="Page size for taker asset discovery",
    )
    http_timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings instance (useful for testing)."""
    global _settings
    _settings = None

# src/inventory_tracker/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Inventory Tracker API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # API Keys: mapping of API key to client name (JSON string as env var)
    # Format: '{"key_abc123": "front_desk", "key_xyz789": "warehouse"}'
    api_keys: dict[str, str] = Field(default_factory=dict)

    # Inventory
    seed_examples: bool = True

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Rate Limiting
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60

    # Notifications (ntfy or gotify webhook)
    webhook_enabled: bool = False
    webhook_url: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()

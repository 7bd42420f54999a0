"""Cart Store Configuration"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="CART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "cart-store"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8002
    log_level: str = "INFO"

    # Storage
    storage_backend: Literal["memory", "file"] = "file"
    storage_path: str = "cart_storage.json"
    storage_key: str = "@Cart"

    # Write-through retry
    persist_max_attempts: int = 3
    persist_backoff_initial: float = 0.1
    persist_backoff_max: float = 2.0


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

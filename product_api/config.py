from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings, read from environment variables or a .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Application Meta ---
    APP_NAME: str = "Product Catalog API"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./products.db"
    DATABASE_ECHO: bool = False

    # --- Caching (disabled when REDIS_URL is unset) ---
    REDIS_URL: Optional[str] = None
    CACHE_TTL: int = 300  # seconds

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- HTTP ---
    CORS_ORIGINS: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()

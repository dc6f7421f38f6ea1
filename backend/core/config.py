"""
Centralized configuration for the Inventory Editor service.

All environment variables and settings should be defined here
to avoid duplication across modules.
"""
import os
from functools import lru_cache


class Settings:
    """Application settings loaded from environment variables."""

    # CORS - comma-separated list of allowed origins
    ALLOWED_ORIGINS: list = os.environ.get(
        "ALLOWED_ORIGINS",
        "http://localhost:8090,http://localhost:5173,http://127.0.0.1:8090"
    ).split(",")

    # Directory holding the workbooks the editor may open
    DATA_DIR: str = os.environ.get("INVENTORY_EDITOR_DATA_DIR", "data")

    # Editor column layout (JSON); empty means the packaged default
    CONFIG_PATH: str = os.environ.get("INVENTORY_EDITOR_CONFIG", "")

    # API key for protecting endpoints that change workbooks (optional)
    API_KEY: str = os.environ.get("INVENTORY_EDITOR_API_KEY", "")

    LOG_LEVEL: str = os.environ.get("INVENTORY_EDITOR_LOG_LEVEL", "INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for easy import
settings = get_settings()

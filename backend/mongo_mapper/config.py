"""
Configuration loaded from environment variables.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Mapper settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MONGO_MAPPER_",
        env_file=".env",
        extra="ignore",
    )

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    default_database: str = "mongo_mapper"
    client_name: str = "default"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts and tests using the library.

    Args:
        level: Level name, falls back to ``Settings.log_level``
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

"""Application settings using Pydantic BaseSettings."""

import logging
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    GRAPHS_STORE_BACKEND: Literal["ini", "duckdb"] = "ini"
    GRAPHS_INI_PATH: str = "data/graphs.ini"
    DUCKDB_PATH: str = "data/grafana.duckdb"
    GRAPHS_SEED_PATH: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env file
    )


# Global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from LOG_LEVEL.

    Args:
        level: Level name overriding settings.LOG_LEVEL (optional)
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

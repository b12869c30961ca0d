"""
Runtime settings loaded from environment variables and an optional .env file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings with validation.

    Values come from ``FINSTORE_*`` environment variables or ``.env``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Root log level for configure_logging")

    # Rendering of indeterminate ratios (zero denominators)
    na_display: str = Field("N/A", description="Text shown for non-finite ratios")
    ratio_decimals: int = Field(2, ge=0, le=10)

    # Absolute difference allowed when reconciling statement totals
    identity_tolerance: float = Field(0.01, ge=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

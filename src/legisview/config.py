"""
Engine configuration and environment settings.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from LEGISVIEW_* environment variables."""

    # Source settings
    base_url: str = "https://www.legislation.gov.uk"
    allowed_hosts: list[str] = ["www.legislation.gov.uk", "legislation.gov.uk"]

    # Transport settings
    user_agent: str = "Legal Research Tool (Educational)"
    request_timeout: float = 30.0

    # Retrieval thresholds (tuned against live pages, expect to retune)
    min_content_length: int = 1000
    interstitial_max_size: int = 30000
    include_enacted_contents: bool = True

    # Search settings
    search_results_count: int = 50

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "LEGISVIEW_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached engine settings."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the engine."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

"""Configuration settings for the training load engine."""

import logging
from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/training_load/config.py
PACKAGE_ROOT = Path(__file__).parent  # src/training_load/
PROJECT_ROOT = PACKAGE_ROOT.parent.parent  # repository root

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Settings loaded from TRAINING_LOAD_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRAINING_LOAD_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    # CLI windows
    history_days: int = 90  # Activities considered by `loads` / `status`
    trend_days: int = 28  # Rows shown by `trends`


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """
    Install a stream handler on the package logger.

    Only entry points call this; library modules just use
    logging.getLogger(__name__).
    """
    package_logger = logging.getLogger("training_load")
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    package_logger.setLevel(level)

    if not any(getattr(h, "_training_load", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))
        handler._training_load = True
        package_logger.addHandler(handler)

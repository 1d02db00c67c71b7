"""Validator configuration using pydantic-settings.

Loads configuration from environment variables (and a project ``.env`` file
if present) with sensible defaults.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Load .env file from project root
_env_path = Path(__file__).resolve().parents[2] / ".env"
if _env_path.exists():
    load_dotenv(_env_path)
    logger.debug(f"Loaded environment from {_env_path}")


class ValidatorSettings(BaseSettings):
    """Configuration for the match validator.

    All settings can be overridden via environment variables.
    The prefix VOLLEY_VALIDATION_ is used for all settings.

    Example:
        export VOLLEY_VALIDATION_LEVEL=3
        export VOLLEY_VALIDATION_PARALLEL=false
    """

    model_config = SettingsConfigDict(
        env_prefix="VOLLEY_VALIDATION_",
        case_sensitive=False,
    )

    # Validation settings
    level: int = Field(default=2, ge=0, le=3)
    parallel: bool = True
    max_workers: int = Field(default=4, ge=1)

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> ValidatorSettings:
    """Get cached settings instance.

    Returns:
        ValidatorSettings loaded from environment.
    """
    return ValidatorSettings()

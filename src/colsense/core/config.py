"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ScoringSettings(BaseSettings):
    """Header scoring and dictionary validation configuration."""

    model_config = {"env_prefix": "COLSENSE_SCORING_"}

    header_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    max_header_rows: int = Field(default=10, ge=1)
    validate_dictionaries: bool = True  # disable in prod


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "COLSENSE_"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"

    scoring: ScoringSettings = ScoringSettings()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the process-wide settings, read from the environment once."""
    return AppSettings(scoring=ScoringSettings())

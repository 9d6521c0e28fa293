"""Logging setup for applications embedding ColSense."""

from __future__ import annotations

import logging

from colsense.core.config import AppSettings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure root logging from application settings."""
    if settings is None:
        settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

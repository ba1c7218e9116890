"""
config.py — Environment-based configuration using Pydantic Settings.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Catalog ──────────────────────────────────────────────────────────
    # JSON file replacing the bundled catalog; None = bundled
    catalog_path: Optional[str] = None

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: str = "text"  # json | text
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"log_level must be one of {valid}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid = {"json", "text"}
        if v.lower() not in valid:
            raise ValueError(f"log_format must be one of {valid}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# ============================================================
# Logging
# ============================================================

class JSONLineFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach a single handler to the package logger per the settings."""
    settings = settings or get_settings()

    logger = logging.getLogger("spec_compare")
    logger.setLevel(settings.log_level)
    logger.handlers.clear()

    if settings.log_file:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    if settings.log_format == "json":
        handler.setFormatter(JSONLineFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        ))
    logger.addHandler(handler)
    return logger

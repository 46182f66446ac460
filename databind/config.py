"""
databind configuration — all environment variables in one place.

Read from environment at import time. Nothing here is required; the kernel
itself is pure and only the smoke-test entry point touches logging setup.
"""

from __future__ import annotations

import logging
import os


class Settings:
    """Settings from environment variables."""

    # Logging
    LOG_LEVEL: str = os.environ.get("DATABIND_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.environ.get(
        "DATABIND_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")


# Singleton instance
settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured level (entry points only)."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL),
        format=settings.LOG_FORMAT,
    )

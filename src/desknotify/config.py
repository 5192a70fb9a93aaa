"""Configuration management for desknotify.

Loads settings from environment variables and .env file.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class DesknotifyConfig(BaseModel):
    """Application configuration — all from env vars or defaults."""

    # Strategy selection: "darwin" picks terminal-notifier, anything else notify-send
    platform: str = Field(
        default_factory=lambda: os.getenv("DESKNOTIFY_PLATFORM", sys.platform)
    )

    # terminal-notifier sound name used when a notification carries none
    default_sound: str = Field(
        default_factory=lambda: os.getenv("DESKNOTIFY_DEFAULT_SOUND", "default")
    )

    log_level: str = Field(
        default_factory=lambda: os.getenv("DESKNOTIFY_LOG_LEVEL", "WARNING")
    )

    @property
    def is_macos(self) -> bool:
        return self.platform == "darwin"


def load_config() -> DesknotifyConfig:
    """Load configuration from environment."""
    return DesknotifyConfig()


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output through stdlib logging to stderr, filtered at `level`.

    Stdout is left alone: the only thing written there is the missing-tool
    diagnostic. Without this call, warnings still reach stderr through
    logging's last-resort handler and debug output is dropped.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=numeric, stream=sys.stderr, format="%(message)s", force=True)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

"""
Constants, text helpers, and structured logging shared by the rename engine.

This module re-exports the configuration constants used for parsing episode
filenames and planning renames, along with the log level enumeration used by
the structured logger.
"""

from .constants import (
    BRACKETED_REGEX,
    CONFIDENCE_HIGH,
    CONFIDENCE_LOW,
    CONFIDENCE_MEDIUM,
    DEBUG,
    HIGH_CONFIDENCE_PERCENT,
    LOG_LEVEL,
    MEDIUM_CONFIDENCE_PERCENT,
    REASON_NAME_MISMATCH,
    REASON_NO_PATTERN,
    SEASON_EPISODE_REGEX,
    SEPARATOR_REGEX,
    VIDEO_EXTENSIONS,
)
from .logger import LogLevel

__all__ = [
    "DEBUG",
    "LOG_LEVEL",
    "VIDEO_EXTENSIONS",
    "SEASON_EPISODE_REGEX",
    "BRACKETED_REGEX",
    "SEPARATOR_REGEX",
    "HIGH_CONFIDENCE_PERCENT",
    "MEDIUM_CONFIDENCE_PERCENT",
    "CONFIDENCE_HIGH",
    "CONFIDENCE_MEDIUM",
    "CONFIDENCE_LOW",
    "REASON_NO_PATTERN",
    "REASON_NAME_MISMATCH",
    "LogLevel",
]

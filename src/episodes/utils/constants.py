"""
Constants and configuration settings for episode renaming.

This module contains the accepted video extensions, the regex patterns used to
parse episode filenames, the confidence policy used when inferring a show
name, and the fixed reasons attached to skipped rename operations. Runtime
settings are read from the environment (a local ``.env`` file is honored).
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# Run settings
DEBUG = os.getenv("EPISODE_RENAMER_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}
LOG_LEVEL = os.getenv("EPISODE_RENAMER_LOG_LEVEL", "INFO").strip().upper()

# Accepted video file extensions
VIDEO_EXTENSIONS = frozenset({".mkv", ".avi", ".mp4", ".flv", ".m4v", ".mov", ".wmv"})

# Regex patterns for filename parsing
SEASON_EPISODE_REGEX = re.compile(r"[Ss]([0-9]{1,2})[Ee]([0-9]{1,2})")
BRACKETED_REGEX = re.compile(r"[\[(].*?[\])]")
SEPARATOR_REGEX = re.compile(r"[._-]")

# Show name inference policy (percent of candidates agreeing with the winner)
HIGH_CONFIDENCE_PERCENT = 100
MEDIUM_CONFIDENCE_PERCENT = 80

# Confidence tiers
CONFIDENCE_HIGH = "high"
CONFIDENCE_MEDIUM = "medium"
CONFIDENCE_LOW = "low"

# Reasons attached to skipped rename operations
REASON_NO_PATTERN = "No S##E## pattern found"
REASON_NAME_MISMATCH = "Show name not found in filename"

"""
Constants and configuration settings for media renaming.

This module contains the constants used while discovering, parsing and renaming
episode files: default extensions, the season/episode tag pattern, catalog API
settings and the status codes reported by the apply step. Values that make
sense to change per machine are read from the environment (and from a ``.env``
file, if present).
"""

import os
import re

from dotenv import load_dotenv

from mediarename import __version__
from . import logger
from .logger import LogLevel

load_dotenv()


def env_number(name: str, default, cast=int):
    """Read a numeric setting from the environment, falling back to ``default`` when unset or malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.log("startup.error", LogLevel.ERROR, msg="Ignoring malformed setting", var=name, value=raw, default=default)
        return default


# Run settings
WORKERS = max(1, env_number("MEDIARENAME_WORKERS", 1))
LOG_LEVEL = os.getenv("MEDIARENAME_LOG_LEVEL", "INFO")

# Accepted video file extensions
VIDEO_EXTENSIONS = {".mkv", ".mp4", ".avi", ".mov"}

# Season marker, episode marker, then an optional second episode marker sharing the season.
# Digit counts are open-ended so "e123" still matches.
SEASON_EPISODE_REGEX = re.compile(r"(s\d+)(e\d+)-?(e\d+)?", re.IGNORECASE)

# TVMaze API configuration
API_BASE_URL = os.getenv("MEDIARENAME_API_BASE", "https://api.tvmaze.com")
REQUEST_TIMEOUT = env_number("MEDIARENAME_TIMEOUT", 10.0, float)
USER_AGENT = f"mediarename/{__version__}"

# Processing status codes
STATUS_OK = "OK"
STATUS_COPY = "COPY"
STATUS_SKIP = "SKIP"
STATUS_FAIL = "FAIL"
STATUS_DRY_RUN = "DRY-RUN"

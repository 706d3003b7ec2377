"""
Constants, logging and external collaborators used by the renaming core.

This package holds the configuration constants, the structured logger, the
TVMaze metadata client and the filesystem helpers (file discovery and name
sanitization) that the ``mediarename.rename`` package builds on.
"""

from .constants import (
    API_BASE_URL,
    LOG_LEVEL,
    REQUEST_TIMEOUT,
    SEASON_EPISODE_REGEX,
    STATUS_COPY,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
    USER_AGENT,
    VIDEO_EXTENSIONS,
    WORKERS,
)
from .logger import LogLevel

__all__ = [
    "VIDEO_EXTENSIONS",
    "SEASON_EPISODE_REGEX",
    "API_BASE_URL",
    "REQUEST_TIMEOUT",
    "USER_AGENT",
    "LOG_LEVEL",
    "STATUS_OK",
    "STATUS_COPY",
    "STATUS_SKIP",
    "STATUS_FAIL",
    "STATUS_DRY_RUN",
    "WORKERS",
    "LogLevel",
]

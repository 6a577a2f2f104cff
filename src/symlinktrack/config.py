"""Configuration for symlink-track."""

from __future__ import annotations

import os
from typing import Final

PACKAGE_NAME: Final[str] = "symlink-track"
VERSION: Final[str] = "0.2.0"
BUG_REPORT: Final[str] = "https://github.com/symlink-track/symlink-track/issues"

LOG_LEVEL_ENV: Final[str] = "SYMLINK_TRACK_LOG_LEVEL"
LOG_FORMAT_ENV: Final[str] = "SYMLINK_TRACK_LOG_FORMAT"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

# Used when the platform reports no limit (e.g. GNU Hurd) or no pathconf at all
FALLBACK_PATH_MAX: Final[int] = 32767


def _platform_path_max() -> int:
    try:
        limit = os.pathconf("/", "PC_PATH_MAX")
    except (AttributeError, OSError, ValueError):
        return FALLBACK_PATH_MAX
    return limit if limit > 0 else FALLBACK_PATH_MAX


PATH_MAX: Final[int] = _platform_path_max()

DEFAULT_MAX_HOPS: Final[int | None] = None  # unbounded

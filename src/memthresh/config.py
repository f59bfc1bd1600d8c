"""Runtime settings for memthresh, taken from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_MEMINFO_PATH = "/proc/meminfo"
HELP_FLAGS = frozenset({"-h", "/h", "/help", "--help", "/?", "-?"})
FALLBACK_SHELL = "/bin/sh"  # login(1) uses this when the passwd shell is empty


def _parse_log_level(raw: str | None) -> int:
    if not raw:
        return logging.WARNING
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(slots=True, frozen=True)
class Settings:
    """Immutable settings for a single run."""

    meminfo_path: str = DEFAULT_MEMINFO_PATH
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from MEMTHRESH_* environment variables.

        MEMTHRESH_MEMINFO overrides the statistics file and
        MEMTHRESH_LOG_LEVEL enables debug tracing on stderr.
        """
        return cls(
            meminfo_path=os.getenv("MEMTHRESH_MEMINFO") or DEFAULT_MEMINFO_PATH,
            log_level=_parse_log_level(os.getenv("MEMTHRESH_LOG_LEVEL")),
        )

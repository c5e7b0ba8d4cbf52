"""Configuration management for zzsleep.

Only the ambient logging setup is configurable, and only through the
environment. The time grammar and the wait loop are fixed.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from zzsleep.config.paths import default_log_file

ENV_LOG_LEVEL: Final[str] = "ZZSLEEP_LOG_LEVEL"
DEFAULT_CONSOLE_LEVEL: Final[int] = logging.WARNING


def _parse_level(raw: str | None) -> int:
    """Map a level name or number to a ``logging`` level.

    Unknown values fall back to the default console level.
    """
    if raw is None:
        return DEFAULT_CONSOLE_LEVEL
    candidate = raw.strip()
    if not candidate:
        return DEFAULT_CONSOLE_LEVEL
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate.upper())
    return level if isinstance(level, int) else DEFAULT_CONSOLE_LEVEL


@dataclass(frozen=True, slots=True)
class Config:
    """Application configuration."""

    # Rotating log file, disabled when None
    log_file: Path | None = None

    # Level for the rich console handler
    console_level: int = field(default=DEFAULT_CONSOLE_LEVEL)

    @classmethod
    def load(cls, env: Mapping[str, str] | None = None) -> "Config":
        """Build configuration from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ`` (for testing).

        Returns:
            Config: Loaded configuration.
        """
        mapping = env if env is not None else os.environ
        return cls(
            log_file=default_log_file(mapping),
            console_level=_parse_level(mapping.get(ENV_LOG_LEVEL)),
        )


__all__ = ["Config", "DEFAULT_CONSOLE_LEVEL", "ENV_LOG_LEVEL"]

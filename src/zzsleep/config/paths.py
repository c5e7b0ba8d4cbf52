"""Shared path utilities for log locations.

Policy:
- Logs go to a file only when ``ZZSLEEP_LOG_FILE`` names one.
- Relative and ``~`` paths are expanded and resolved before use.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


ENV_LOG_FILE: Final[str] = "ZZSLEEP_LOG_FILE"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
) -> Path | None:
    """Resolve an optional path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return None


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file path, or ``None`` when file logging is off."""

    return resolve_overridable_path(explicit_path=None, env=env, env_var=ENV_LOG_FILE)


__all__ = ["ENV_LOG_FILE", "default_log_file", "resolve_overridable_path"]

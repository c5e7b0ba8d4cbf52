"""Command line argument options."""

from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class CountdownArgs:
    """Arguments for a single countdown invocation."""

    quiet: bool
    time_tokens: tuple[str, ...]


__all__ = ["CountdownArgs"]

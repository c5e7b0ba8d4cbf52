"""Wall clock and sleep seams.

The waiter takes both as plain callables so tests can drive it with a fake
clock instead of real time.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]
Sleeper = Callable[[float], None]


def local_now() -> datetime:
    """Return the current time as an aware datetime in the local zone."""

    return datetime.now().astimezone()


def system_sleep(seconds: float) -> None:
    """Block the calling thread for ``seconds`` (negative values are ignored)."""

    if seconds > 0:
        time.sleep(seconds)


__all__ = ["Clock", "Sleeper", "local_now", "system_sleep"]

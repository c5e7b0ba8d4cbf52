"""
Summary: Fixed timing and rendering constants for the countdown.
Why: Keep wait-loop cadence and bar geometry in one place, out of user reach.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Final

# Wait loop -------------------------------------------------------------------

# One tick of the progress loop. The display has 1 s granularity, so most
# ticks end without a redraw.
POLL_INTERVAL: Final[timedelta] = timedelta(milliseconds=50)

# Lower bound for the displayed total so the bar never divides by zero.
MIN_TOTAL_DURATION: Final[timedelta] = timedelta(seconds=1)


# Rendering -------------------------------------------------------------------

BAR_WIDTH: Final[int] = 40
BAR_COMPLETE_STYLE: Final[str] = "cyan"
BAR_REMAINING_STYLE: Final[str] = "blue"


# Command line ----------------------------------------------------------------

QUIET_FLAGS: Final[frozenset[str]] = frozenset({"-q", "--quiet"})
PROGRAM_NAME: Final[str] = "zz"


__all__ = [
    "BAR_COMPLETE_STYLE",
    "BAR_REMAINING_STYLE",
    "BAR_WIDTH",
    "MIN_TOTAL_DURATION",
    "POLL_INTERVAL",
    "PROGRAM_NAME",
    "QUIET_FLAGS",
]

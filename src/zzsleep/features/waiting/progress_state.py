"""Mutable countdown state and the frames it produces.

A frame is only produced when the whole number of elapsed seconds changes,
so a fast poll never redraws the same second twice.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import final

from zzsleep.config.settings import MIN_TOTAL_DURATION
from zzsleep.features.waiting.eta import format_eta, format_remaining


@final
@dataclass(frozen=True, slots=True)
class ProgressFrame:
    """Snapshot handed to a display on each redraw."""

    elapsed_seconds: int
    total_seconds: int
    remaining_seconds: int
    eta: str

    @property
    def completed(self) -> int:
        """Elapsed seconds capped at the total, for the bar position."""
        return min(self.elapsed_seconds, self.total_seconds)

    @property
    def fraction(self) -> float:
        return self.completed / self.total_seconds

    @property
    def remaining_text(self) -> str:
        return format_remaining(self.remaining_seconds)

    @property
    def status(self) -> str:
        return f"{self.remaining_text} | ETA {self.eta}"


@final
@dataclass(slots=True)
class ProgressState:
    """Countdown state owned by a single wait."""

    start_time: datetime
    end_time: datetime
    total_seconds: int
    last_rendered_elapsed: int | None = None

    @classmethod
    def begin(cls, end_time: datetime, now: datetime) -> "ProgressState":
        """Start tracking a countdown towards ``end_time``.

        The displayed total is at least ``MIN_TOTAL_DURATION`` so the bar is
        never zero-length.
        """
        span = max(end_time - now, MIN_TOTAL_DURATION)
        total_seconds = math.ceil(span.total_seconds())
        return cls(start_time=now, end_time=end_time, total_seconds=total_seconds)

    def is_finished(self, now: datetime) -> bool:
        return now >= self.end_time

    def elapsed_seconds(self, now: datetime) -> int:
        return max(0, math.floor((now - self.start_time).total_seconds()))

    def remaining_seconds(self, now: datetime) -> int:
        return max(0, math.ceil((self.end_time - now).total_seconds()))

    def observe(self, now: datetime) -> ProgressFrame | None:
        """Return a frame if the elapsed second changed since the last one.

        Args:
            now: Freshly sampled current time.

        Returns:
            ProgressFrame | None: New frame, or ``None`` when nothing changed.
        """
        elapsed = self.elapsed_seconds(now)
        if elapsed == self.last_rendered_elapsed:
            return None
        self.last_rendered_elapsed = elapsed
        return ProgressFrame(
            elapsed_seconds=elapsed,
            total_seconds=self.total_seconds,
            remaining_seconds=self.remaining_seconds(now),
            eta=format_eta(self.end_time, now),
        )


__all__ = ["ProgressFrame", "ProgressState"]

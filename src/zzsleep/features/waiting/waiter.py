"""
Summary: Block until an end time, optionally driving a live progress display.
Why: Re-derive remaining time from the clock every tick so the wait never drifts.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol, final, runtime_checkable

from zzsleep.config.settings import POLL_INTERVAL
from zzsleep.features.waiting.progress_state import ProgressFrame, ProgressState
from zzsleep.platform.logging import logger
from zzsleep.shared.clock import Clock, Sleeper, local_now, system_sleep


@runtime_checkable
class CountdownDisplayLike(Protocol):
    """Protocol for anything that can render countdown frames."""

    def start(self, frame: ProgressFrame) -> None:
        ...

    def render(self, frame: ProgressFrame) -> None:
        ...

    def complete(self) -> None:
        ...

    def stop(self) -> None:
        ...


@final
class ProgressWaiter:
    """Wait for an end time using an injectable clock and sleep."""

    def __init__(
        self,
        clock: Clock = local_now,
        sleep: Sleeper = system_sleep,
        poll_interval: timedelta = POLL_INTERVAL,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._poll_seconds = poll_interval.total_seconds()

    def wait(
        self,
        end: datetime,
        quiet: bool,
        display: CountdownDisplayLike | None = None,
    ) -> None:
        """Block until ``end``.

        Args:
            end: Aware end time.
            quiet: Sleep once without rendering anything.
            display: Display to drive when not quiet.

        Raises:
            ValueError: If progress mode is requested without a display.
        """
        logger.debug(
            "Waiting until %s",
            end.isoformat(),
            extra={"countdown_event": "countdown.wait.start", "end_time": end, "quiet": quiet},
        )
        if quiet:
            self.wait_quietly(end)
        else:
            if display is None:
                raise ValueError("a display is required unless waiting quietly")
            self.wait_with_progress(end, display)
        logger.debug(
            "Countdown finished",
            extra={"countdown_event": "countdown.wait.complete", "end_time": end},
        )

    def wait_quietly(self, end: datetime) -> None:
        """Sleep once for the whole remaining duration."""

        remaining = max((end - self._clock()).total_seconds(), 0.0)
        self._sleep(remaining)

    def wait_with_progress(self, end: datetime, display: CountdownDisplayLike) -> None:
        """Poll the clock every tick and redraw when the elapsed second changes.

        Args:
            end: Aware end time.
            display: Display receiving the initial frame, each changed frame,
                and a completion call once ``end`` is reached.
        """
        state = ProgressState.begin(end, self._clock())
        initial = state.observe(state.start_time)
        assert initial is not None
        display.start(initial)
        try:
            while True:
                self._sleep(self._poll_seconds)
                now = self._clock()
                if state.is_finished(now):
                    break
                frame = state.observe(now)
                if frame is None:
                    continue
                display.render(frame)
            display.complete()
        finally:
            display.stop()


def wait_until(
    end: datetime,
    quiet: bool,
    display: CountdownDisplayLike | None = None,
) -> None:
    """Block until ``end`` using the real clock."""

    ProgressWaiter().wait(end, quiet, display)


__all__ = ["CountdownDisplayLike", "ProgressWaiter", "wait_until"]

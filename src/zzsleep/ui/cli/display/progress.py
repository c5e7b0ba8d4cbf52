"""Progress display functionality for CLI."""

from typing import final

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn

from zzsleep.config.settings import BAR_COMPLETE_STYLE, BAR_REMAINING_STYLE, BAR_WIDTH
from zzsleep.features.waiting import ProgressFrame
from zzsleep.platform.logging import console_for, logger


@final
class CountdownProgressDisplay:
    """Render countdown frames as a rich progress bar.

    Auto refresh is off: the screen only changes when the waiter hands over
    a new frame.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Create the display.

        Args:
            console: Console to draw on. Defaults to the logger's console so
                log lines and the bar share one stream.
        """
        if console is None:
            console = console_for(logger) or Console(stderr=True)

        self._progress = Progress(
            TextColumn("⠿"),
            BarColumn(
                bar_width=BAR_WIDTH,
                style=BAR_REMAINING_STYLE,
                complete_style=BAR_COMPLETE_STYLE,
                finished_style=BAR_COMPLETE_STYLE,
            ),
            TextColumn("{task.fields[status]}", markup=False),
            console=console,
            auto_refresh=False,
            transient=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        self._task_id: TaskID | None = None
        self._total = 0

    def start(self, frame: ProgressFrame) -> None:
        self._total = frame.total_seconds
        self._progress.start()
        self._task_id = self._progress.add_task(
            "countdown",
            total=frame.total_seconds,
            completed=frame.completed,
            status=frame.status,
        )
        self._progress.refresh()

    def render(self, frame: ProgressFrame) -> None:
        if self._task_id is None:
            return
        self._progress.update(self._task_id, completed=frame.completed, status=frame.status)
        self._progress.refresh()

    def complete(self) -> None:
        """Fill the bar; the last status text stays on screen."""
        if self._task_id is None:
            return
        self._progress.update(self._task_id, completed=self._total)
        self._progress.refresh()

    def stop(self) -> None:
        self._progress.stop()


__all__ = ["CountdownProgressDisplay"]

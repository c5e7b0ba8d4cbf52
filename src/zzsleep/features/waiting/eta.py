"""
Summary: Render end times and remaining durations for the countdown line.
Why: Show only as much of the end time as is needed to tell when it is.
"""

from __future__ import annotations

from datetime import datetime


def format_eta(end: datetime, now: datetime) -> str:
    """Render ``end`` abbreviated relative to ``now``.

    Same local date gives ``HH:MM:SS``, same year gives ``MM-DD HH:MM:SS``,
    anything else gives ``YYYY-MM-DD HH:MM:SS``.

    Args:
        end: End time to render.
        now: Reference time; converted into ``end``'s zone before comparing.

    Returns:
        str: Abbreviated end time.
    """
    if end.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(end.tzinfo)

    if end.date() == now.date():
        return end.strftime("%H:%M:%S")
    if end.year == now.year:
        return end.strftime("%m-%d %H:%M:%S")
    return end.strftime("%Y-%m-%d %H:%M:%S")


def format_remaining(seconds: int) -> str:
    """Render a second count as ``HH:MM:SS``; hours are not capped at 24."""

    seconds = max(seconds, 0)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


__all__ = ["format_eta", "format_remaining"]

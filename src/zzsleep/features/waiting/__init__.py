"""
Summary: Public API for the countdown wait and its formatting helpers.
Why: Let the CLI import the waiter, frames, and ETA formatting from one place.
"""

from zzsleep.features.waiting.eta import format_eta, format_remaining
from zzsleep.features.waiting.progress_state import ProgressFrame, ProgressState
from zzsleep.features.waiting.waiter import CountdownDisplayLike, ProgressWaiter, wait_until

__all__ = [
    "CountdownDisplayLike",
    "ProgressFrame",
    "ProgressState",
    "ProgressWaiter",
    "format_eta",
    "format_remaining",
    "wait_until",
]

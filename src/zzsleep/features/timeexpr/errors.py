"""
Summary: Error taxonomy for time expression parsing.
Why: Give the CLI descriptive, input-carrying failures to report verbatim.
"""

from __future__ import annotations

from collections.abc import Sequence


class TimeExpressionError(ValueError):
    """Base class for every time expression failure."""


class NoArgumentsError(TimeExpressionError):
    """Raised when no time tokens were supplied."""

    def __init__(self) -> None:
        super().__init__("no arguments provided")


class UnrecognizedArgumentError(TimeExpressionError):
    """Raised when no grammar rule matches the input."""

    def __init__(self, value: str) -> None:
        self.value: str = value
        super().__init__(f"could not parse argument: {value}")


class TooManyArgumentsError(TimeExpressionError):
    """Raised when a single-token format receives several tokens."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens: tuple[str, ...] = tuple(tokens)
        super().__init__(f"could not parse arguments: {list(self.tokens)!r}")


class AmbiguousLocalTimeError(TimeExpressionError):
    """Raised when a wall-clock time maps to zero or two instants."""

    def __init__(self, value: str, wall_time: str) -> None:
        self.value: str = value
        self.wall_time: str = wall_time
        super().__init__(
            f"local time {wall_time} is ambiguous or does not exist "
            f"(daylight saving transition): {value}"
        )


class OutOfRangeError(TimeExpressionError):
    """Raised when the end time cannot be represented."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens: tuple[str, ...] = tuple(tokens)
        super().__init__(f"end time out of range: {' '.join(self.tokens)}")


__all__ = [
    "AmbiguousLocalTimeError",
    "NoArgumentsError",
    "OutOfRangeError",
    "TimeExpressionError",
    "TooManyArgumentsError",
    "UnrecognizedArgumentError",
]

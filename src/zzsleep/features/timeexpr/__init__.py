"""
Summary: Public API for time expression parsing.
Why: Let the CLI depend on one import path for the parser and its errors.
"""

from zzsleep.features.timeexpr.errors import (
    AmbiguousLocalTimeError,
    NoArgumentsError,
    OutOfRangeError,
    TimeExpressionError,
    TooManyArgumentsError,
    UnrecognizedArgumentError,
)
from zzsleep.features.timeexpr.parser import TimeExpressionParser, parse_end_time

__all__ = [
    "AmbiguousLocalTimeError",
    "NoArgumentsError",
    "OutOfRangeError",
    "TimeExpressionError",
    "TimeExpressionParser",
    "TooManyArgumentsError",
    "UnrecognizedArgumentError",
    "parse_end_time",
]

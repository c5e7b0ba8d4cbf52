"""
Summary: Turn command line time expressions into an absolute end time.
Why: Resolve the bare-number, duration, clock and ISO grammars in one ordered pass.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import ClassVar, final

from zzsleep.features.timeexpr.errors import (
    AmbiguousLocalTimeError,
    NoArgumentsError,
    OutOfRangeError,
    TooManyArgumentsError,
    UnrecognizedArgumentError,
)


@final
class TimeExpressionParser:
    """Parse time tokens relative to a reference ``now``.

    Rules are tried in priority order and the first full match wins:

    1. a single bare non-negative integer is a number of seconds;
    2. one or more ``<int>h|m|s`` tokens are summed;
    3. ``HH:MM`` and ``HH:MM:SS`` are the next occurrence of that local time;
    4. ``YYYYMMDDThhmmss+HHMM`` and ``YYYYMMDDThhmmssZ`` are absolute instants.

    Rules in group 3 and 4 only accept a single token.
    """

    BARE_SECONDS: ClassVar[re.Pattern[str]] = re.compile(r"\+?[0-9]+")
    DURATION: ClassVar[re.Pattern[str]] = re.compile(r"([+-]?[0-9]+)([hms])")
    CLOCK_HM: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{1,2}:[0-9]{2}")
    CLOCK_HMS: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{1,2}:[0-9]{2}:[0-9]{2}")
    ISO_OFFSET: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{8}T[0-9]{6}[+-][0-9]{4}")
    ISO_UTC: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{8}T[0-9]{6}Z")

    UNIT_SECONDS: ClassVar[dict[str, int]] = {"h": 3600, "m": 60, "s": 1}

    def __init__(self, tz: tzinfo | None = None) -> None:
        """Create a parser.

        Args:
            tz: Zone used to resolve wall-clock times. ``None`` uses the
                operating system's local rules.
        """
        self._tz = tz

    def parse(self, tokens: Sequence[str], now: datetime) -> datetime:
        """Parse ``tokens`` into an aware end time.

        Args:
            tokens: Time tokens with any flags already removed.
            now: Aware reference time; captured once by the caller.

        Returns:
            datetime: End time in the local timezone.

        Raises:
            TimeExpressionError: If the tokens do not form a valid expression.
        """
        if not tokens:
            raise NoArgumentsError()

        try:
            seconds = self._bare_seconds(tokens)
            if seconds is None:
                seconds = self._duration_sum(tokens)
            if seconds is not None:
                return now + timedelta(seconds=seconds)
        except OverflowError as e:
            raise OutOfRangeError(tokens) from e

        if len(tokens) != 1:
            raise TooManyArgumentsError(tokens)
        value = tokens[0]

        single_token_rules: tuple[Callable[[str, datetime], datetime | None], ...] = (
            self._clock_time,
            self._iso_with_offset,
            self._iso_utc,
        )
        for rule in single_token_rules:
            try:
                result = rule(value, now)
            except OverflowError as e:
                raise OutOfRangeError(tokens) from e
            if result is not None:
                return result

        raise UnrecognizedArgumentError(value)

    def _bare_seconds(self, tokens: Sequence[str]) -> int | None:
        if len(tokens) == 1 and self.BARE_SECONDS.fullmatch(tokens[0]):
            return int(tokens[0])
        return None

    def _duration_sum(self, tokens: Sequence[str]) -> int | None:
        """Sum ``<int><unit>`` tokens, or ``None`` if any token does not match."""

        total = 0
        for token in tokens:
            match = self.DURATION.fullmatch(token)
            if match is None:
                return None
            amount, unit = match.groups()
            total += int(amount) * self.UNIT_SECONDS[unit]
        return total

    def _clock_time(self, value: str, now: datetime) -> datetime | None:
        """Resolve ``HH:MM`` or ``HH:MM:SS`` to its next local occurrence."""

        if self.CLOCK_HM.fullmatch(value):
            fmt = "%H:%M"
        elif self.CLOCK_HMS.fullmatch(value):
            fmt = "%H:%M:%S"
        else:
            return None

        try:
            wall_time: time = datetime.strptime(value, fmt).time()
        except ValueError:
            return None

        today = now.astimezone(self._tz).date()
        naive = datetime.combine(today, wall_time)
        end = self._localize(naive, value)
        if end <= now:
            # The target is less than a day away, one step is always enough.
            end = self._localize(naive + timedelta(days=1), value)
        return end

    def _iso_with_offset(self, value: str, now: datetime) -> datetime | None:
        _ = now
        if not self.ISO_OFFSET.fullmatch(value):
            return None
        try:
            instant = datetime.strptime(value, "%Y%m%dT%H%M%S%z")
        except ValueError:
            return None
        return instant.astimezone(self._tz)

    def _iso_utc(self, value: str, now: datetime) -> datetime | None:
        _ = now
        if not self.ISO_UTC.fullmatch(value):
            return None
        try:
            naive = datetime.strptime(value[:-1], "%Y%m%dT%H%M%S")
        except ValueError:
            return None
        return naive.replace(tzinfo=timezone.utc).astimezone(self._tz)

    def _localize(self, naive: datetime, value: str) -> datetime:
        """Attach the local zone, rejecting DST gaps and overlaps."""

        if self._tz is None:
            earlier = naive.replace(fold=0).astimezone()
            later = naive.replace(fold=1).astimezone()
        else:
            earlier = naive.replace(tzinfo=self._tz, fold=0)
            later = naive.replace(tzinfo=self._tz, fold=1)

        if earlier.utcoffset() != later.utcoffset():
            raise AmbiguousLocalTimeError(value, naive.isoformat(sep=" "))
        return earlier


def parse_end_time(
    tokens: Sequence[str],
    now: datetime,
    *,
    tz: tzinfo | None = None,
) -> datetime:
    """Parse time tokens into an end time.

    Args:
        tokens: Time tokens, flags removed.
        now: Aware reference time.
        tz: Optional zone for wall-clock resolution (defaults to system local).

    Returns:
        datetime: Aware end time.
    """
    return TimeExpressionParser(tz).parse(tokens, now)


__all__ = ["TimeExpressionParser", "parse_end_time"]

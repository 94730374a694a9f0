"""TimeRange value type and its wraparound arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pytimetable._clock import (
    ClockTime,
    format_decimal_hours,
    parse_clock_time,
    sanitize_echo,
)
from pytimetable._constants import (
    END_TIME_KEY,
    HOURS_PER_DAY,
    RANGE_SEPARATOR,
    START_TIME_KEY,
)
from pytimetable._errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_INVALID_RANGE,
    InvalidDurationError,
    InvalidTimeFormatError,
    MissingFieldError,
)


def _wrap(hours: float) -> float:
    # Single midnight crossing only.
    if hours < 0:
        hours += HOURS_PER_DAY
    return hours


def _validate_duration(hours: Any) -> float:
    if (
        isinstance(hours, bool)
        or not isinstance(hours, (int, float))
        or not math.isfinite(hours)
        or hours < 0
    ):
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"duration must be a finite, non-negative number of hours, got {hours!r}",
        )
    return float(hours)


@dataclass(frozen=True)
class TimeRange:
    """A span between two clock times, possibly crossing midnight.

    There is no ordering constraint between ``start`` and ``end``: a range
    whose end is earlier than its start runs into the next day.
    """

    start: ClockTime
    end: ClockTime

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if not isinstance(value, ClockTime):
                raise InvalidTimeFormatError(
                    f"{ERR_MSG_INVALID_RANGE}: {sanitize_echo(value)}",
                    f"time range {name} must be a ClockTime, got {type(value).__name__} {value!r}",
                )

    @property
    def start_hour(self) -> float:
        return self.start.decimal

    @property
    def end_hour(self) -> float:
        return self.end.decimal

    @property
    def crosses_midnight(self) -> bool:
        return self.end < self.start

    def duration(self) -> float:
        """Length in hours, in ``[0, 24)``. Equal ends give a zero-length slot."""
        return _wrap(self.end_hour - self.start_hour)

    def offset_from(self, reference: ClockTime) -> float:
        """Hours from ``reference`` forward to the start of this range."""
        return _wrap(self.start_hour - reference.decimal)

    def format(self) -> str:
        return (
            format_decimal_hours(self.start_hour)
            + RANGE_SEPARATOR
            + format_decimal_hours(self.end_hour)
        )

    def overlaps_with(self, other: TimeRange) -> bool:
        return self.start_hour < other.end_hour and self.end_hour > other.start_hour

    def is_before(self, other: TimeRange) -> bool:
        return self.start_hour < other.start_hour

    def is_after(self, other: TimeRange) -> bool:
        return self.start_hour > other.start_hour

    def with_start_time(self, start_time: str) -> TimeRange:
        """Move the range to a new start, keeping its duration."""
        start = parse_clock_time(start_time)
        return TimeRange(start, ClockTime.from_decimal(start.decimal + self.duration()))

    def with_end_time(self, end_time: str) -> TimeRange:
        return TimeRange(self.start, parse_clock_time(end_time))

    def with_duration(self, hours: float) -> TimeRange:
        """Keep the start and set a new length, rounded to whole minutes."""
        hours = _validate_duration(hours)
        return TimeRange(self.start, ClockTime.from_decimal(self.start_hour + hours))

    def to_dict(self) -> dict[str, float]:
        return {
            "startHour": self.start_hour,
            "endHour": self.end_hour,
            "duration": self.duration(),
        }

    def debug_info(self) -> dict[str, Any]:
        return {"timeRange": self.format(), **self.to_dict()}

    def __str__(self) -> str:
        return self.format()


def make_range(start_time: str | None, end_time: str | None) -> TimeRange:
    """Build a :class:`TimeRange` from two ``HH:mm`` strings.

    Raises:
        MissingFieldError: If either value is empty or ``None``.
        InvalidTimeFormatError: If either value is malformed.
    """
    if not start_time:
        raise MissingFieldError(
            START_TIME_KEY,
            internal_details=f"time range requires {START_TIME_KEY}, got {start_time!r}",
        )
    if not end_time:
        raise MissingFieldError(
            END_TIME_KEY,
            internal_details=f"time range requires {END_TIME_KEY}, got {end_time!r}",
        )
    return TimeRange(parse_clock_time(start_time), parse_clock_time(end_time))


def calculate_end_time(start_time: str, hours: float) -> str:
    """Return the ``HH:mm`` end of a slot starting at ``start_time``."""
    start = parse_clock_time(start_time)
    return format_decimal_hours(start.decimal + _validate_duration(hours))

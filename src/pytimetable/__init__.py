"""pytimetable - Clock-time ranges and offsets for timetable layout."""

from __future__ import annotations

try:
    from pytimetable._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pytimetable._clock import ClockTime, format_decimal_hours, parse_clock_time
from pytimetable._errors import (
    InvalidDurationError,
    InvalidTimeFormatError,
    MissingFieldError,
    TimeRangeError,
)
from pytimetable._grammar import parse_range
from pytimetable._range import TimeRange, calculate_end_time, make_range
from pytimetable.lengths import LengthOption, LengthOptions
from pytimetable.slot import TimeColumn, TimeSlot

__all__ = [
    "calculate_end_time",
    "duration",
    "format_decimal_hours",
    "format_range",
    "make_range",
    "offset_from_reference",
    "parse_clock_time",
    "parse_range",
    "ClockTime",
    "LengthOption",
    "LengthOptions",
    "TimeColumn",
    "TimeRange",
    "TimeSlot",
    "InvalidDurationError",
    "InvalidTimeFormatError",
    "MissingFieldError",
    "TimeRangeError",
]


def duration(time_range: TimeRange) -> float:
    """Length of a range in hours.

    An end earlier than the start is read as running into the next day, so
    the result is always in ``[0, 24)``. Equal start and end give ``0.0``.
    """
    return time_range.duration()


def offset_from_reference(time_range: TimeRange, reference: ClockTime | str) -> float:
    """Hours from ``reference`` forward to the start of ``time_range``.

    Used to position a slot within a timetable that starts at ``reference``.
    A start earlier than the reference wraps into the next day.

    Args:
        time_range: The range being positioned.
        reference: The timetable start, as a ClockTime or an ``HH:mm`` string.

    Raises:
        InvalidTimeFormatError: If ``reference`` is a malformed string.
    """
    if not isinstance(reference, ClockTime):
        reference = parse_clock_time(reference)
    return time_range.offset_from(reference)


def format_range(time_range: TimeRange) -> str:
    """Format a range as ``HH:mm—HH:mm`` on a zero-padded 24-hour clock."""
    return time_range.format()

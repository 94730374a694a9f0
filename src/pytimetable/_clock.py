"""Clock-time parsing and decimal-hour formatting."""

from __future__ import annotations

import html
import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from pytimetable._constants import (
    HOURS_PER_DAY,
    MAX_ECHOED_INPUT_LENGTH,
    MINUTES_PER_HOUR,
)
from pytimetable._errors import (
    ERR_MSG_EXPECTED_FORMAT,
    ERR_MSG_INVALID_TIME_FORMAT,
    InvalidTimeFormatError,
)

logger = logging.getLogger(__name__)

# Hours 0-23 with an optional leading zero, minutes always two digits.
CLOCK_TIME_RE = re.compile(r"([0-1]?[0-9]|2[0-3]):([0-5][0-9])")

_MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR


@dataclass(frozen=True, order=True)
class ClockTime:
    """A wall-clock time of day with no date component."""

    hours: int
    minutes: int = 0

    def __post_init__(self) -> None:
        for value, upper in ((self.hours, HOURS_PER_DAY), (self.minutes, MINUTES_PER_HOUR)):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < upper:
                echo = f"{sanitize_echo(self.hours)}:{sanitize_echo(self.minutes)}"
                raise InvalidTimeFormatError(
                    f"{ERR_MSG_INVALID_TIME_FORMAT}: {echo}. {ERR_MSG_EXPECTED_FORMAT}",
                    f"clock time needs int hours 0-23 and minutes 0-59, "
                    f"got hours={self.hours!r} minutes={self.minutes!r}",
                )

    @property
    def decimal(self) -> float:
        """The time as decimal hours, e.g. 9.5 for 09:30."""
        return self.hours + self.minutes / MINUTES_PER_HOUR

    @classmethod
    def from_decimal(cls, value: float) -> ClockTime:
        """Build a clock time from decimal hours, wrapping past midnight.

        Minutes are rounded half-up to the nearest whole minute.
        """
        total = math.floor(value * MINUTES_PER_HOUR + 0.5) % _MINUTES_PER_DAY
        hours, minutes = divmod(total, MINUTES_PER_HOUR)
        return cls(hours, minutes)

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


def sanitize_echo(value: Any) -> str:
    """Make rejected input safe to repeat in a user-facing message."""
    text = value if isinstance(value, str) else repr(value)
    if len(text) > MAX_ECHOED_INPUT_LENGTH:
        text = text[:MAX_ECHOED_INPUT_LENGTH] + "..."
    return html.escape(text)


def parse_clock_time(value: str) -> ClockTime:
    """Parse an ``HH:mm`` string into a :class:`ClockTime`.

    Raises:
        InvalidTimeFormatError: If the value is not a string, uses the wrong
            separator, or encodes an out-of-range hour or minute.
    """
    match = CLOCK_TIME_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        err = InvalidTimeFormatError(
            f"{ERR_MSG_INVALID_TIME_FORMAT}: {sanitize_echo(value)}. {ERR_MSG_EXPECTED_FORMAT}",
            f"clock time {value!r} does not match {CLOCK_TIME_RE.pattern}",
        )
        logger.debug("rejected clock time: %s", err.internal())
        raise err
    return ClockTime(int(match.group(1)), int(match.group(2)))


def format_decimal_hours(value: float) -> str:
    """Format decimal hours as zero-padded ``HH:mm``.

    Negative values format as ``00:00``. Hours wrap past 24 and a minute
    part that rounds up to 60 carries into the hour.
    """
    if value < 0:
        return "00:00"

    whole = math.floor(value)
    hours = whole % HOURS_PER_DAY
    minutes = math.floor((value - whole) * MINUTES_PER_HOUR + 0.5)
    if minutes >= MINUTES_PER_HOUR:
        hours = (hours + 1) % HOURS_PER_DAY
        minutes = 0

    return f"{hours:02d}:{minutes:02d}"

"""Time slots placed within a timetable and the columns that hold them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pytimetable._clock import (
    ClockTime,
    format_decimal_hours,
    parse_clock_time,
    sanitize_echo,
)
from pytimetable._constants import (
    DEFAULT_SLOT_END,
    DEFAULT_SLOT_START,
    DEFAULT_TIMETABLE_START,
    END_TIME_KEY,
    START_TIME_KEY,
    TIMETABLE_START_CONTEXT_KEY,
)
from pytimetable._errors import ERR_MSG_INVALID_SLOT, InvalidTimeFormatError
from pytimetable._range import TimeRange, make_range


class TimeSlot:
    """A time range positioned relative to its timetable's start time."""

    def __init__(
        self,
        start_time: str,
        end_time: str,
        timetable_start: str = DEFAULT_TIMETABLE_START,
    ) -> None:
        self._range = make_range(start_time, end_time)
        self._timetable_start = parse_clock_time(timetable_start)

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, Any] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> TimeSlot:
        """Build a slot from block attributes and the parent block context.

        Absent keys take the default slot and timetable times; values that
        are present but malformed raise ``InvalidTimeFormatError``.
        """
        attributes = attributes or {}
        context = context or {}

        start = attributes.get(START_TIME_KEY)
        end = attributes.get(END_TIME_KEY)
        timetable_start = context.get(TIMETABLE_START_CONTEXT_KEY)
        return cls(
            DEFAULT_SLOT_START if start is None else start,
            DEFAULT_SLOT_END if end is None else end,
            DEFAULT_TIMETABLE_START if timetable_start is None else timetable_start,
        )

    @property
    def time_range(self) -> TimeRange:
        return self._range

    @property
    def timetable_start(self) -> ClockTime:
        return self._timetable_start

    @property
    def start_hour(self) -> float:
        return self._range.start_hour

    @property
    def end_hour(self) -> float:
        return self._range.end_hour

    @property
    def duration(self) -> float:
        return self._range.duration()

    @property
    def offset(self) -> float:
        """Hours from the timetable start to this slot, wrapping past midnight."""
        return self._range.offset_from(self._timetable_start)

    @property
    def time_range_string(self) -> str:
        return self._range.format()

    def with_timetable_start(self, timetable_start: str) -> TimeSlot:
        return TimeSlot(str(self._range.start), str(self._range.end), timetable_start)

    def __repr__(self) -> str:
        return f"TimeSlot({self.time_range_string!r}, timetable_start='{self._timetable_start}')"


class TimeColumn:
    """A timetable column bounded by a time range and holding time slots."""

    def __init__(
        self,
        start_time: str,
        end_time: str,
        slots: Iterable[TimeSlot | Mapping[str, Any]] = (),
    ) -> None:
        self._range = make_range(start_time, end_time)
        column_start = str(self._range.start)
        self._slots: list[TimeSlot] = [self._build_slot(slot, column_start) for slot in slots]

    @staticmethod
    def _build_slot(slot: TimeSlot | Mapping[str, Any], column_start: str) -> TimeSlot:
        if isinstance(slot, TimeSlot):
            return slot
        if not isinstance(slot, Mapping):
            raise InvalidTimeFormatError(
                f"{ERR_MSG_INVALID_SLOT}: {sanitize_echo(slot)}",
                f"column slot must be a TimeSlot or a mapping, got {type(slot).__name__} {slot!r}",
            )
        return TimeSlot(slot.get(START_TIME_KEY), slot.get(END_TIME_KEY), column_start)

    @property
    def time_range(self) -> TimeRange:
        return self._range

    @property
    def slots(self) -> list[TimeSlot]:
        return list(self._slots)

    @property
    def start_hour(self) -> float:
        return self._range.start_hour

    @property
    def end_hour(self) -> float:
        return self._range.end_hour

    @property
    def duration(self) -> float:
        return self._range.duration()

    @property
    def time_range_string(self) -> str:
        return self._range.format()

    def first_available_hour(self) -> float:
        """Column start when empty, otherwise the latest slot end hour."""
        if not self._slots:
            return self.start_hour
        return max(slot.end_hour for slot in self._slots)

    def first_available_time(self) -> str:
        return format_decimal_hours(self.first_available_hour())

    def conflicting_slots(self, candidate: TimeRange) -> list[TimeSlot]:
        """Slots overlapping ``candidate``.

        Ranges crossing midnight are never reported as conflicts.
        """
        if candidate.crosses_midnight:
            return []
        return [
            slot
            for slot in self._slots
            if not slot.time_range.crosses_midnight
            and slot.time_range.overlaps_with(candidate)
        ]

    def __len__(self) -> int:
        return len(self._slots)

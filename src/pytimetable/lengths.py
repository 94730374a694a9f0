"""Slot length choices and their display labels."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from pytimetable._constants import LENGTH_MATCH_TOLERANCE, MINUTES_PER_HOUR


@dataclass(frozen=True)
class LengthOption:
    """A selectable slot length."""

    label: str
    value: float


class LengthOptions:
    """Predefined slot lengths in decimal hours, plus an optional custom selection."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.selected: float | None = None

    @property
    def values(self) -> list[float]:
        return list(self._values)

    @staticmethod
    def format_label(hours: float) -> str:
        """Render a length as hours, minutes, or both, e.g. ``"1 hours, 30 minutes"``.

        Minutes that round up to 60 carry into the hour, as in
        ``format_decimal_hours``.
        """
        whole = math.floor(hours)
        minutes = math.floor((hours - whole) * MINUTES_PER_HOUR + 0.5)
        if minutes >= MINUTES_PER_HOUR:
            whole += 1
            minutes = 0

        if minutes == 0:
            return f"{whole} hours"
        if whole == 0:
            return f"{minutes} minutes"
        return f"{whole} hours, {minutes} minutes"

    def has_matching_value(self) -> bool:
        if self.selected is None:
            return False
        return any(
            abs(value - self.selected) < LENGTH_MATCH_TOLERANCE for value in self._values
        )

    def options(self) -> list[LengthOption]:
        """Options for the predefined values.

        A positive custom selection not among them is included, and the
        list is then ordered by value.
        """
        options = [LengthOption(self.format_label(v), v) for v in self._values]

        if self.selected is not None and self.selected > 0 and not self.has_matching_value():
            options.append(LengthOption(self.format_label(self.selected), self.selected))
            options.sort(key=lambda option: option.value)

        return options

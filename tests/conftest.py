"""Shared test fixtures."""

import pytest

from pytimetable import make_range, parse_clock_time


@pytest.fixture
def morning_range():
    return make_range("09:30", "12:45")


@pytest.fixture
def overnight_range():
    return make_range("22:00", "03:00")


@pytest.fixture
def nine():
    return parse_clock_time("09:00")


VALID_CLOCK_STRINGS = [
    "00:00",
    "0:00",
    "9:30",
    "09:30",
    "12:45",
    "19:59",
    "20:00",
    "23:59",
]

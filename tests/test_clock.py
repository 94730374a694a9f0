"""Clock-time parsing and formatting tests."""

import pytest

from pytimetable import ClockTime, format_decimal_hours, parse_clock_time
from pytimetable._errors import InvalidTimeFormatError


class TestParseClockTime:
    def test_zero_padded(self):
        assert parse_clock_time("09:30") == ClockTime(9, 30)

    def test_single_digit_hour(self):
        assert parse_clock_time("9:30") == ClockTime(9, 30)

    def test_decimal_hour(self):
        assert parse_clock_time("09:30").decimal == 9.5

    def test_midnight(self):
        assert parse_clock_time("00:00").decimal == 0.0

    def test_last_minute_of_day(self):
        assert parse_clock_time("23:59").decimal == pytest.approx(23 + 59 / 60)

    def test_third_of_hour(self):
        assert parse_clock_time("10:20").decimal == pytest.approx(10 + 1 / 3)

    @pytest.mark.parametrize(
        "value",
        [
            "25:00",
            "24:00",
            "14:65",
            "14:60",
            "abc",
            "",
            "09.30",
            "09-30",
            "9:5",
            "009:30",
            "09:30:00",
            " 09:30",
            "09:30\n",
            "１２:３０",
        ],
    )
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidTimeFormatError):
            parse_clock_time(value)

    @pytest.mark.parametrize("value", [None, 9.5, 930, b"09:30"])
    def test_rejects_non_string(self, value):
        with pytest.raises(InvalidTimeFormatError):
            parse_clock_time(value)


class TestClockTime:
    def test_str_is_zero_padded(self):
        assert str(ClockTime(7, 5)) == "07:05"

    def test_ordering(self):
        assert ClockTime(8, 59) < ClockTime(9, 0)
        assert ClockTime(9, 0) == ClockTime(9)

    def test_from_decimal(self):
        assert ClockTime.from_decimal(13.25) == ClockTime(13, 15)

    def test_from_decimal_wraps_past_midnight(self):
        assert ClockTime.from_decimal(25.5) == ClockTime(1, 30)

    def test_from_decimal_wraps_negative(self):
        assert ClockTime.from_decimal(-1) == ClockTime(23, 0)

    def test_from_decimal_rounds_to_minute(self):
        assert ClockTime.from_decimal(10 + 1 / 3) == ClockTime(10, 20)

    @pytest.mark.parametrize(
        "hours, minutes",
        [(24, 0), (30, 99), (-1, 0), (9, 60), (9, -5), (True, 0), (9, False), (9.5, 0), ("9", 30), (None, 0)],
    )
    def test_rejects_out_of_range_fields(self, hours, minutes):
        with pytest.raises(InvalidTimeFormatError):
            ClockTime(hours, minutes)

    def test_rejected_fields_are_escaped(self):
        with pytest.raises(InvalidTimeFormatError) as exc_info:
            ClockTime("<b>", 0)
        assert "&lt;b&gt;" in str(exc_info.value)
        assert "'<b>'" in exc_info.value.internal()

    def test_bounds_accepted(self):
        assert ClockTime(23, 59).decimal < 24
        assert ClockTime(0, 0).decimal == 0.0


class TestFormatDecimalHours:
    def test_whole_hour(self):
        assert format_decimal_hours(9) == "09:00"

    def test_half_hour(self):
        assert format_decimal_hours(9.5) == "09:30"

    def test_negative(self):
        assert format_decimal_hours(-1) == "00:00"

    def test_overflow_past_24(self):
        assert format_decimal_hours(25.25) == "01:15"

    def test_minute_carry(self):
        assert format_decimal_hours(9.9999) == "10:00"

    def test_minute_carry_at_midnight(self):
        assert format_decimal_hours(23.9999) == "00:00"

    def test_repeating_fraction(self):
        assert format_decimal_hours(10 + 1 / 3) == "10:20"

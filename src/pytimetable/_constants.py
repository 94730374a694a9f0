"""Clock arithmetic constants and defaults."""

HOURS_PER_DAY = 24
"""Length of the wraparound period; ranges cross at most one midnight."""

MINUTES_PER_HOUR = 60

RANGE_SEPARATOR = "—"
"""Em dash placed between start and end in a formatted range."""

DEFAULT_TIMETABLE_START = "09:00"
"""Timetable start used when block context carries none."""

DEFAULT_SLOT_START = "09:00"
DEFAULT_SLOT_END = "10:00"

START_TIME_KEY = "startTime"
END_TIME_KEY = "endTime"
TIMETABLE_START_CONTEXT_KEY = "fair-timetable/startTime"

LENGTH_MATCH_TOLERANCE = 0.01
"""Hours within which a selected length counts as a predefined one."""

MAX_ECHOED_INPUT_LENGTH = 32
"""Longest slice of rejected input repeated back in a user message."""

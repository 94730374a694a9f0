"""Lark grammar for reading a formatted time range back into a TimeRange."""

from __future__ import annotations

import logging

from lark import Lark, LarkError

from pytimetable._clock import sanitize_echo
from pytimetable._errors import ERR_MSG_INVALID_RANGE, InvalidTimeFormatError
from pytimetable._range import TimeRange, make_range

logger = logging.getLogger(__name__)

# CLOCK accepts any digits; hour and minute bounds are checked by parse_clock_time.
RANGE_GRAMMAR = r"""
    start: CLOCK _SEPARATOR CLOCK

    CLOCK: /[0-9]+:[0-9]+/
    _SEPARATOR: "—" | "–" | "-"

    %import common.WS_INLINE
    %ignore WS_INLINE
"""

_parser = Lark(RANGE_GRAMMAR, parser="lalr")


def parse_range(text: str) -> TimeRange:
    """Parse ``HH:mm—HH:mm`` (em dash, en dash or hyphen) into a TimeRange.

    Raises:
        InvalidTimeFormatError: If the text is not two clock times joined by
            a dash, or either clock time is out of range.
    """
    if not isinstance(text, str):
        raise InvalidTimeFormatError(
            f"{ERR_MSG_INVALID_RANGE}: {sanitize_echo(text)}",
            f"time range must be a string, got {type(text).__name__}",
        )
    try:
        tree = _parser.parse(text)
    except LarkError as e:
        err = InvalidTimeFormatError(
            f"{ERR_MSG_INVALID_RANGE}: {sanitize_echo(text)}",
            f"cannot parse time range {text!r}: {e}",
            wrapped=e,
        )
        logger.debug("rejected time range: %s", err.internal())
        raise err from e

    start, end = (str(token) for token in tree.children)
    return make_range(start, end)

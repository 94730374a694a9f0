"""Exception hierarchy for clock-time parsing and range arithmetic."""


class TimeRangeError(Exception):
    """Base exception for time-range errors.

    Provides dual messaging: a sanitized user-facing message that is safe to
    render back into markup, and internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidTimeFormatError(TimeRangeError):
    """Raised when a string is not a valid HH:mm clock time."""


class MissingFieldError(TimeRangeError):
    """Raised when the start or end of a range is empty or absent."""

    def __init__(
        self,
        field: str,
        user_message: str = "",
        internal_details: str = "",
    ) -> None:
        super().__init__(
            user_message or f"{field} {ERR_MSG_MISSING_FIELD}",
            internal_details,
        )
        self.field = field


class InvalidDurationError(TimeRangeError):
    """Raised when a duration is negative or not a finite number."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_TIME_FORMAT = "invalid time format"
ERR_MSG_EXPECTED_FORMAT = "Expected HH:mm format."
ERR_MSG_MISSING_FIELD = "is required"
ERR_MSG_INVALID_RANGE = "invalid time range"
ERR_MSG_INVALID_DURATION = "invalid duration value"
ERR_MSG_INVALID_SLOT = "invalid time slot"

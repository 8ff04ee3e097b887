"""Error types for session analytics.

Every analytics function is total over well-formed input except the
per-hobby average, which has no value for a log without hobbies.
"""


class AnalyticsError(Exception):
    """Base exception for all analytics errors."""

    pass


class UndefinedAverageError(AnalyticsError, ZeroDivisionError):
    """Raised when an average is requested over zero hobbies.

    Attributes:
        total_minutes: Numerator of the attempted division
        hobby_count: Divisor of the attempted division (always 0)
    """

    def __init__(self, total_minutes: int, hobby_count: int = 0) -> None:
        self.total_minutes = total_minutes
        self.hobby_count = hobby_count
        super().__init__(
            f"Average time per hobby is undefined: {total_minutes} minutes over {hobby_count} hobbies"
        )

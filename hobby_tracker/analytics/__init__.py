"""Pure analytics over hobby logs: aggregates, enrichment, and orderings."""

from hobby_tracker.analytics.aggregates import (
    average_time_per_hobby,
    count_mood,
    long_sessions,
    mood_counts,
    session_count,
    sessions_for_hobby,
    sessions_on_day,
    total_time,
    total_time_for_hobby,
    unique_hobbies,
)
from hobby_tracker.analytics.errors import AnalyticsError, UndefinedAverageError
from hobby_tracker.analytics.sorting import sort_by_day, sort_by_minutes_desc

__all__ = [
    "AnalyticsError",
    "UndefinedAverageError",
    "average_time_per_hobby",
    "count_mood",
    "long_sessions",
    "mood_counts",
    "session_count",
    "sessions_for_hobby",
    "sessions_on_day",
    "sort_by_day",
    "sort_by_minutes_desc",
    "total_time",
    "total_time_for_hobby",
    "unique_hobbies",
]

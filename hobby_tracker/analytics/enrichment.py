"""Session enrichment.

Each enrichment returns a new list with one row per session, in the log's
order. A row holds the session's own fields plus values derived from the
whole log. Collection-wide values are computed once per call.
"""

from collections.abc import Callable
from typing import Any

from loguru import logger

from hobby_tracker.analytics.aggregates import (
    average_time_per_hobby,
    count_mood,
    long_sessions,
    mood_counts,
    total_time,
    total_time_for_hobby,
    unique_hobbies,
)
from hobby_tracker.sessions.types import HobbyLog, Session

EnrichedSession = dict[str, Any]


def enrich(log: HobbyLog, derive: Callable[[Session], dict[str, Any]]) -> list[EnrichedSession]:
    """Augment every session with derived fields.

    Args:
        log: Sessions to enrich
        derive: Callable returning the extra fields for one session

    Returns:
        New rows (session fields merged with derived fields), same length and order as log
    """
    rows = [{**session.model_dump(), **derive(session)} for session in log]
    logger.debug(f"Enriched {len(rows)} sessions")
    return rows


def with_mood_count(log: HobbyLog) -> list[EnrichedSession]:
    """Add how many sessions in the log share each session's mood."""
    counts = mood_counts(log)
    return enrich(log, lambda session: {"mood_count": counts[session.mood]})


def with_unique_hobbies(log: HobbyLog) -> list[EnrichedSession]:
    """Add the full unique-hobby list to every session.

    Each row gets its own list so callers can modify one row safely.
    """
    hobbies = unique_hobbies(log)
    return enrich(log, lambda session: {"unique_hobbies": list(hobbies)})


def with_unique_hobbies_count(log: HobbyLog) -> list[EnrichedSession]:
    hobby_count = len(unique_hobbies(log))
    return enrich(log, lambda session: {"unique_hobbies_count": hobby_count})


def with_long_sessions_count(log: HobbyLog, threshold: int) -> list[EnrichedSession]:
    """Add the number of sessions longer than threshold minutes."""
    long_count = len(long_sessions(log, threshold))
    return enrich(log, lambda session: {"long_sessions_count": long_count})


def with_hobby_total(log: HobbyLog) -> list[EnrichedSession]:
    """Add total minutes spent on each session's hobby."""
    totals = {hobby: total_time_for_hobby(log, hobby) for hobby in unique_hobbies(log)}
    return enrich(log, lambda session: {"hobby_total_minutes": totals[session.hobby]})


def with_total_time(log: HobbyLog) -> list[EnrichedSession]:
    minutes = total_time(log)
    return enrich(log, lambda session: {"total_minutes": minutes})


def with_average_time_per_hobby(log: HobbyLog) -> list[EnrichedSession]:
    """Add the average minutes per hobby, rounded to two decimals.

    An empty log has nothing to enrich and returns an empty list.
    """
    if not log:
        return []
    average = round(average_time_per_hobby(log), 2)
    return enrich(log, lambda session: {"average_time_per_hobby": average})


def with_mood_total(log: HobbyLog, mood: str) -> list[EnrichedSession]:
    """Add the log-wide count of one mood, keyed as '<mood>_sessions'."""
    mood_total = count_mood(log, mood)
    return enrich(log, lambda session: {f"{mood}_sessions": mood_total})

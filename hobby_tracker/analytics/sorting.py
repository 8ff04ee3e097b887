"""Stable session orderings.

Both helpers return new lists and rely on sorted() being stable, so
sessions with equal keys keep their original relative order.
"""

from hobby_tracker.sessions.types import HobbyLog, Session


def sort_by_minutes_desc(log: HobbyLog) -> list[Session]:
    """Order sessions from longest to shortest."""
    return sorted(log, key=lambda session: session.minutes, reverse=True)


def sort_by_day(log: HobbyLog) -> list[Session]:
    """Order sessions alphabetically by day name (not calendar order)."""
    return sorted(log, key=lambda session: session.day)

"""Session aggregates.

Pure, stateless helpers over a hobby log. None of them mutate the log;
list results are always new lists in the log's original order.
"""

from loguru import logger

from hobby_tracker.analytics.errors import UndefinedAverageError
from hobby_tracker.sessions.types import HobbyLog, Session


def total_time(log: HobbyLog) -> int:
    """Sum minutes across every session in the log.

    Args:
        log: Sessions to sum

    Returns:
        Total minutes (0 for an empty log)
    """
    return sum(session.minutes for session in log)


def unique_hobbies(log: HobbyLog) -> list[str]:
    """Return hobby names without duplicates, in order of first appearance.

    Args:
        log: Sessions to scan

    Returns:
        Distinct hobby names
    """
    seen: set[str] = set()
    hobbies: list[str] = []
    for session in log:
        if session.hobby not in seen:
            seen.add(session.hobby)
            hobbies.append(session.hobby)
    return hobbies


def long_sessions(log: HobbyLog, threshold: int) -> list[Session]:
    """Return sessions strictly longer than threshold minutes.

    Args:
        log: Sessions to filter
        threshold: Minutes a session must exceed (any integer)

    Returns:
        Matching sessions in original order
    """
    return [session for session in log if session.minutes > threshold]


def count_mood(log: HobbyLog, mood: str) -> int:
    """Count sessions whose mood exactly equals the given label."""
    return sum(1 for session in log if session.mood == mood)


def sessions_for_hobby(log: HobbyLog, hobby: str) -> list[Session]:
    return [session for session in log if session.hobby == hobby]


def total_time_for_hobby(log: HobbyLog, hobby: str) -> int:
    """Total minutes spent on a single hobby."""
    return total_time(sessions_for_hobby(log, hobby))


def sessions_on_day(log: HobbyLog, day: str) -> list[Session]:
    return [session for session in log if session.day == day]


def session_count(log: HobbyLog) -> int:
    return len(log)


def average_time_per_hobby(log: HobbyLog) -> float:
    """Average minutes per distinct hobby.

    Total minutes divided by the number of unique hobbies, as real division.

    Args:
        log: Sessions to average

    Returns:
        Average minutes per hobby (unrounded)

    Raises:
        UndefinedAverageError: If the log has no hobbies (empty log)
    """
    minutes = total_time(log)
    hobby_count = len(unique_hobbies(log))
    if hobby_count == 0:
        logger.warning(f"Cannot average {minutes} minutes over zero hobbies")
        raise UndefinedAverageError(minutes, hobby_count)
    return minutes / hobby_count


def mood_counts(log: HobbyLog) -> dict[str, int]:
    """Build a frequency map of mood labels in a single pass.

    Args:
        log: Sessions to scan

    Returns:
        Mapping of mood label to occurrence count, keyed in order of first appearance
    """
    counts: dict[str, int] = {}
    for session in log:
        counts[session.mood] = counts.get(session.mood, 0) + 1
    logger.debug(f"Counted {len(counts)} distinct moods over {len(log)} sessions")
    return counts

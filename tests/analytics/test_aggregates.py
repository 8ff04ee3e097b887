"""Tests for session aggregates.

Covers the rules every aggregate must keep:
- Results are derived, the log is never mutated
- Filters keep original order
- Labels compare case-sensitively
- Averaging over zero hobbies is an explicit error
"""

import pytest

from hobby_tracker.analytics import (
    AnalyticsError,
    UndefinedAverageError,
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
from hobby_tracker.sessions import Session


def make_session(day: str, hobby: str, minutes: int, mood: str = "calm") -> Session:
    return Session(day=day, hobby=hobby, minutes=minutes, mood=mood)


def test_total_time_sums_all_minutes(hobby_log):
    assert total_time(hobby_log) == 155


def test_total_time_empty_log_is_zero(empty_log):
    assert total_time(empty_log) == 0


def test_unique_hobbies_in_first_appearance_order(hobby_log):
    assert unique_hobbies(hobby_log) == ["drawing", "reading", "gaming"]


def test_unique_hobbies_has_no_duplicates_and_covers_log(hobby_log):
    hobbies = unique_hobbies(hobby_log)

    assert len(hobbies) == len(set(hobbies))
    assert len(hobbies) <= len(hobby_log)
    assert set(hobbies) == {session.hobby for session in hobby_log}


def test_unique_hobbies_is_case_sensitive():
    log = [
        make_session("Monday", "Drawing", 10),
        make_session("Tuesday", "drawing", 10),
    ]

    assert unique_hobbies(log) == ["Drawing", "drawing"]


def test_unique_hobbies_empty_log(empty_log):
    assert unique_hobbies(empty_log) == []


def test_long_sessions_is_strictly_greater(hobby_log):
    result = long_sessions(hobby_log, 30)

    # Monday has exactly 30 minutes and is excluded
    assert [(s.day, s.minutes) for s in result] == [("Wednesday", 45), ("Friday", 35)]


def test_long_sessions_matches_every_qualifying_session(hobby_log):
    for threshold in (-1, 0, 20, 25, 33, 44, 45, 100):
        result = long_sessions(hobby_log, threshold)
        assert all(session.minutes > threshold for session in result)
        assert result == [s for s in hobby_log if s.minutes > threshold]


def test_long_sessions_negative_threshold_returns_everything(hobby_log):
    assert long_sessions(hobby_log, -5) == hobby_log


def test_long_sessions_threshold_above_max_is_empty(hobby_log):
    assert long_sessions(hobby_log, 1000) == []


def test_count_mood(hobby_log):
    assert count_mood(hobby_log, "relaxed") == 1
    assert count_mood(hobby_log, "focused") == 1


def test_count_mood_unknown_label_is_zero(hobby_log, empty_log):
    assert count_mood(hobby_log, "bored") == 0
    assert count_mood(hobby_log, "Relaxed") == 0
    assert count_mood(empty_log, "relaxed") == 0


def test_total_time_for_hobby(hobby_log):
    assert total_time_for_hobby(hobby_log, "drawing") == 55
    assert total_time_for_hobby(hobby_log, "reading") == 55
    assert total_time_for_hobby(hobby_log, "gaming") == 45
    assert total_time_for_hobby(hobby_log, "knitting") == 0


def test_sessions_for_hobby_keeps_order(hobby_log):
    result = sessions_for_hobby(hobby_log, "drawing")

    assert [s.day for s in result] == ["Monday", "Thursday"]


def test_sessions_on_day(hobby_log):
    monday = sessions_on_day(hobby_log, "Monday")

    assert len(monday) == 1
    assert monday[0].hobby == "drawing"
    assert sessions_on_day(hobby_log, "Sunday") == []


def test_session_count(hobby_log, empty_log):
    assert session_count(hobby_log) == 5
    assert session_count(empty_log) == 0


def test_average_time_per_hobby(hobby_log):
    average = average_time_per_hobby(hobby_log)

    assert average == pytest.approx(155 / 3)
    assert round(average, 2) == 51.67


def test_average_time_per_hobby_empty_log_raises(empty_log):
    """Averaging over zero hobbies raises instead of returning NaN or infinity."""
    with pytest.raises(UndefinedAverageError, match="0 hobbies") as exc_info:
        average_time_per_hobby(empty_log)

    assert exc_info.value.total_minutes == 0
    assert exc_info.value.hobby_count == 0
    assert isinstance(exc_info.value, AnalyticsError)
    assert isinstance(exc_info.value, ZeroDivisionError)


def test_mood_counts_matches_count_mood(hobby_log):
    counts = mood_counts(hobby_log)

    assert counts == {"focused": 1, "relaxed": 1, "excited": 1, "creative": 1, "calm": 1}
    for mood, count in counts.items():
        assert count == count_mood(hobby_log, mood)


def test_mood_counts_repeated_moods():
    log = [
        make_session("Monday", "drawing", 10, mood="calm"),
        make_session("Tuesday", "reading", 10, mood="happy"),
        make_session("Wednesday", "gaming", 10, mood="calm"),
    ]

    assert mood_counts(log) == {"calm": 2, "happy": 1}
    assert list(mood_counts(log)) == ["calm", "happy"]


def test_mood_counts_empty_log(empty_log):
    assert mood_counts(empty_log) == {}


def test_aggregates_are_pure(hobby_log):
    snapshot = list(hobby_log)

    first = (
        total_time(hobby_log),
        unique_hobbies(hobby_log),
        long_sessions(hobby_log, 30),
        count_mood(hobby_log, "calm"),
        mood_counts(hobby_log),
    )
    second = (
        total_time(hobby_log),
        unique_hobbies(hobby_log),
        long_sessions(hobby_log, 30),
        count_mood(hobby_log, "calm"),
        mood_counts(hobby_log),
    )

    assert first == second
    assert hobby_log == snapshot


def test_aggregates_accept_tuples():
    log = (
        make_session("Monday", "drawing", 10),
        make_session("Tuesday", "drawing", 15),
    )

    assert total_time(log) == 25
    assert unique_hobbies(log) == ["drawing"]
    assert long_sessions(log, 10) == [log[1]]

"""Demonstration hobby log: one week of sessions in chronological order."""

from hobby_tracker.sessions.types import Session

HOBBY_LOG: tuple[Session, ...] = (
    Session(day="Monday", hobby="drawing", minutes=30, mood="focused"),
    Session(day="Tuesday", hobby="reading", minutes=20, mood="relaxed"),
    Session(day="Wednesday", hobby="gaming", minutes=45, mood="excited"),
    Session(day="Thursday", hobby="drawing", minutes=25, mood="creative"),
    Session(day="Friday", hobby="reading", minutes=35, mood="calm"),
)

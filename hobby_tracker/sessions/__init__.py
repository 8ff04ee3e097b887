"""Hobby session records and the demonstration dataset."""

from hobby_tracker.sessions.dataset import HOBBY_LOG
from hobby_tracker.sessions.types import HobbyLog, Session, Weekday

__all__ = [
    "HOBBY_LOG",
    "HobbyLog",
    "Session",
    "Weekday",
]

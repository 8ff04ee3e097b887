"""Hobby session schema.

A session is one recorded instance of a hobby. Sessions are immutable:
every analytics operation returns new values and never edits a session.
"""

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Weekday = Literal[
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


class Session(BaseModel):
    """One hobby session.

    Attributes:
        day: Weekday name the session happened on
        hobby: Activity name (compared case-sensitively)
        minutes: Duration in minutes, never negative
        mood: Free-form mood label (compared case-sensitively)
    """

    model_config = ConfigDict(frozen=True)

    day: Weekday
    hobby: str
    minutes: int = Field(ge=0)
    mood: str


# Ordered collection of sessions. Order is insertion order.
HobbyLog = Sequence[Session]

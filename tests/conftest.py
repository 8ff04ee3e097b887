"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import pytest

from hobby_tracker.sessions import HOBBY_LOG, Session


@pytest.fixture
def hobby_log() -> list[Session]:
    """The demonstration hobby log as a list, so tests can check it is never mutated."""
    return list(HOBBY_LOG)


@pytest.fixture
def empty_log() -> list[Session]:
    return []

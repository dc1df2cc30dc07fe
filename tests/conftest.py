"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dugout.db.connection import create_connection
from tests.fakes.stores import FakeRosterEventStore, StubLeagueLock
from tests.helpers import TODAY_LOCK, TOMORROW_LOCK

if TYPE_CHECKING:
    import sqlite3
    from collections.abc import Generator


@pytest.fixture
def conn() -> Generator[sqlite3.Connection]:
    connection = create_connection(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def fake_store() -> FakeRosterEventStore:
    return FakeRosterEventStore()


@pytest.fixture
def league_lock() -> StubLeagueLock:
    """A league whose last lock was Game 6 and whose next lock is Game 7."""
    return StubLeagueLock(last=TODAY_LOCK, next=TOMORROW_LOCK)

"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from events.services import EventService
from events.stores import InMemoryEventStore


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store: InMemoryEventStore, now: datetime) -> EventService:
    return EventService(store, clock=lambda: now)

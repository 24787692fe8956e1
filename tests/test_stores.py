"""Tests for EventStore implementations.

Both stores must satisfy the same contract; the Django store runs against
the test database. Run with: pytest tests/test_stores.py -v
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from events import models
from events.domain import Event, EventId, Money
from events.services import EventService, build_event_service
from events.stores import InMemoryEventStore
from events.stores.django_store import DjangoEventStore


@pytest.fixture(params=["memory", "django"])
def any_store(request):
    if request.param == "django":
        request.getfixturevalue("db")
        return DjangoEventStore()
    return InMemoryEventStore()


def full_event() -> Event:
    return Event(
        id=EventId.generate(),
        name="Concert",
        tags=("Music", "vip"),
        ticket_price=Money(amount=Decimal("49.99")),
        event_date_time=datetime(2026, 9, 1, 19, 30, tzinfo=timezone.utc),
        duration_minutes=120,
    )


class TestEventStoreContract:
    """Tests shared by every EventStore."""

    def test_save_and_find_round_trip(self, any_store):
        event = full_event()
        assert any_store.save(event) == event
        assert any_store.find_by_id(event.id) == event

    def test_find_missing_returns_none(self, any_store):
        assert any_store.find_by_id(EventId.generate()) is None

    def test_exists_by_id(self, any_store):
        event = any_store.save(full_event())
        assert any_store.exists_by_id(event.id)
        assert not any_store.exists_by_id(EventId.generate())

    def test_save_replaces_existing(self, any_store):
        event = any_store.save(full_event())
        replacement = Event(id=event.id, name="Renamed")

        any_store.save(replacement)

        assert any_store.find_by_id(event.id) == replacement
        assert len(any_store.find_all()) == 1

    def test_delete_by_id(self, any_store):
        event = any_store.save(full_event())
        any_store.delete_by_id(event.id)
        assert any_store.find_by_id(event.id) is None

    def test_save_without_id_is_rejected(self, any_store):
        with pytest.raises(ValueError):
            any_store.save(Event(name="anonymous"))


class TestInMemoryEventStore:
    """Tests specific to InMemoryEventStore."""

    def test_seeded_events_are_stored(self):
        event = full_event()
        assert InMemoryEventStore([event]).find_all() == [event]

    def test_delete_missing_is_noop(self):
        store = InMemoryEventStore()
        store.delete_by_id(EventId.generate())
        assert store.find_all() == []

    def test_find_all_keeps_insertion_order(self):
        store = InMemoryEventStore()
        first = store.save(Event(id=EventId.generate(), name="first"))
        second = store.save(Event(id=EventId.generate(), name="second"))
        assert store.find_all() == [first, second]


@pytest.mark.django_db
class TestServiceWithDjangoStore:
    """EventService running on the ORM store."""

    def test_create_and_query(self):
        service = EventService(DjangoEventStore())
        created = service.create_event(
            Event(name="Gala", tags=(" VIP ",), ticket_price=Money(amount=Decimal("15")))
        )

        assert service.get_event(str(created.id)) == created
        assert service.get_events_by_tag("vip") == [created]
        assert service.get_events_by_price_range(Decimal("10"), Decimal("20")) == [created]

    def test_returned_event_matches_stored_price_scale(self):
        service = EventService(DjangoEventStore())

        created = service.create_event(Event(name="Fair", ticket_price=Money(amount=Decimal("1.005"))))
        repriced = service.update_event_price(created.id, Decimal("2.499"))

        assert repriced == service.get_event(created.id)
        assert created.ticket_price.amount.as_tuple().exponent == -2

    def test_find_all_orders_by_creation_time(self):
        service = build_event_service()
        first = service.create_event(Event(name="first"))
        second = service.create_event(Event(name="second"))
        models.Event.objects.filter(id=first.id.value).update(
            created_at=datetime(2026, 1, 2, tzinfo=timezone.utc)
        )
        models.Event.objects.filter(id=second.id.value).update(
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)
        )

        assert [e.name for e in service.list_events()] == ["second", "first"]

"""Django ORM implementation of the EventStore."""

from events import models
from events.domain import Event, EventId, Money
from events.stores.interfaces import EventStore


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        name=row.name,
        tags=tuple(row.tags or ()),
        ticket_price=Money(amount=row.ticket_price) if row.ticket_price is not None else None,
        event_date_time=row.event_date_time,
        duration_minutes=row.duration_minutes,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def save(self, event: Event) -> Event:
        if event.id is None:
            raise ValueError("Cannot store an event without an ID")
        row, _ = models.Event.objects.update_or_create(
            id=event.id.value,
            defaults={
                "name": event.name,
                "tags": list(event.tags),
                "ticket_price": event.ticket_price.amount if event.ticket_price else None,
                "event_date_time": event.event_date_time,
                "duration_minutes": event.duration_minutes,
            },
        )
        row.refresh_from_db()
        return _to_domain(row)

    def find_by_id(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(id=event_id.value).first()
        if row is None:
            return None
        return _to_domain(row)

    def find_all(self) -> list[Event]:
        return [_to_domain(row) for row in models.Event.objects.all()]

    def exists_by_id(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def delete_by_id(self, event_id: EventId) -> None:
        models.Event.objects.filter(id=event_id.value).delete()

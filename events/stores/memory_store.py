"""In-process EventStore backed by a dict."""

from events.domain import Event, EventId
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Keeps events in insertion order. Not thread-safe."""

    def __init__(self, events: list[Event] | None = None) -> None:
        self._events: dict[EventId, Event] = {}
        for event in events or []:
            self.save(event)

    def save(self, event: Event) -> Event:
        if event.id is None:
            raise ValueError("Cannot store an event without an ID")
        self._events[event.id] = event
        return event

    def find_by_id(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def find_all(self) -> list[Event]:
        return list(self._events.values())

    def exists_by_id(self, event_id: EventId) -> bool:
        return event_id in self._events

    def delete_by_id(self, event_id: EventId) -> None:
        self._events.pop(event_id, None)

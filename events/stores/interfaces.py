"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Insert or replace an event and return the stored version.

        The event must already carry an ID.
        """
        ...

    @abstractmethod
    def find_by_id(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_all(self) -> list[Event]:
        """Return all events in store order."""
        ...

    @abstractmethod
    def exists_by_id(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def delete_by_id(self, event_id: EventId) -> None:
        """Remove an event. Missing IDs are ignored."""
        ...

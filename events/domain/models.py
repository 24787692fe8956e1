"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, Money


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    Only ``id`` is guaranteed once the event has been stored; every other
    field may be left unset, which is how partial updates are expressed.
    """

    id: EventId | None = None
    name: str | None = None
    tags: tuple[str, ...] = ()
    ticket_price: Money | None = None
    event_date_time: datetime | None = None
    duration_minutes: int | None = None

    def __post_init__(self) -> None:
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValueError("Duration must be a positive number of minutes")
        if self.event_date_time is not None and self.event_date_time.tzinfo is None:
            raise ValueError("Event date/time must be timezone-aware")

    def has_tag(self, normalized_tag: str) -> bool:
        """Return True if any non-blank tag matches after trim + lowercase."""
        return any(
            tag.strip().lower() == normalized_tag
            for tag in self.tags
            if tag and not tag.isspace()
        )

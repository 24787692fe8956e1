"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate arguments before touching the store
- Perform orchestration and error mapping
- Return domain models or domain errors

Filtering operations scan the full result of ``find_all()``; there is no
index or pagination.
"""

import dataclasses
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from events.domain import (
    Event,
    EventId,
    EventNotFoundError,
    InvalidArgumentError,
    InvalidEventIdError,
    Money,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

EventIdLike = EventId | UUID | str


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_event_id(event_id: EventIdLike | None) -> EventId:
    if event_id is None:
        raise InvalidArgumentError("Id must not be null")
    if isinstance(event_id, EventId):
        return event_id
    if isinstance(event_id, UUID):
        return EventId(value=event_id)
    try:
        return EventId.from_string(event_id)
    except (ValueError, AttributeError, TypeError) as e:
        raise InvalidEventIdError() from e


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = _utcnow) -> None:
        self._store = store
        self._clock = clock

    def create_event(self, event: Event | None) -> Event:
        """Store a new event, generating an ID if it has none.

        Raises:
            InvalidArgumentError: If event is None.
        """
        if event is None:
            raise InvalidArgumentError("Event must not be null")
        if event.id is None:
            event = dataclasses.replace(event, id=EventId.generate())
        saved = self._store.save(event)
        logger.info("Created event %s", saved.id)
        return saved

    def get_event(self, event_id: EventIdLike | None) -> Event:
        """Return an event by ID.

        Raises:
            InvalidArgumentError: If event_id is None.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        return self._require(_parse_event_id(event_id))

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.find_all()

    def update_event(self, event_id: EventIdLike | None, event: Event | None) -> Event:
        """Replace an event. The stored ID is always ``event_id``, whatever the payload says.

        Raises:
            InvalidArgumentError: If event_id or event is None.
            EventNotFoundError: If the event does not exist.
        """
        if event_id is None or event is None:
            raise InvalidArgumentError("Id and event must not be null")
        parsed_id = _parse_event_id(event_id)
        if not self._store.exists_by_id(parsed_id):
            logger.warning("Update of unknown event %s", parsed_id)
            raise EventNotFoundError(str(parsed_id))
        saved = self._store.save(dataclasses.replace(event, id=parsed_id))
        logger.info("Updated event %s", parsed_id)
        return saved

    def delete_event(self, event_id: EventIdLike | None) -> None:
        """Delete an event.

        Raises:
            InvalidArgumentError: If event_id is None.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = _parse_event_id(event_id)
        if not self._store.exists_by_id(parsed_id):
            logger.warning("Delete of unknown event %s", parsed_id)
            raise EventNotFoundError(str(parsed_id))
        self._store.delete_by_id(parsed_id)
        logger.info("Deleted event %s", parsed_id)

    def partial_update_event(self, event_id: EventIdLike | None, partial: Event | None) -> Event:
        """Merge the set fields of ``partial`` onto an existing event.

        Empty tags and non-positive durations count as unset.

        Raises:
            InvalidArgumentError: If event_id or partial is None.
            EventNotFoundError: If the event does not exist.
        """
        if event_id is None or partial is None:
            raise InvalidArgumentError("Id and partial event must not be null")
        existing = self._require(_parse_event_id(event_id))

        changes = {}
        if partial.name is not None:
            changes["name"] = partial.name
        if partial.tags:
            changes["tags"] = partial.tags
        if partial.ticket_price is not None:
            changes["ticket_price"] = partial.ticket_price
        if partial.event_date_time is not None:
            changes["event_date_time"] = partial.event_date_time
        if partial.duration_minutes is not None and partial.duration_minutes > 0:
            changes["duration_minutes"] = partial.duration_minutes

        saved = self._store.save(dataclasses.replace(existing, **changes))
        logger.info("Patched event %s (%s)", existing.id, ", ".join(sorted(changes)) or "no changes")
        return saved

    def get_events_by_tag(self, tag: str | None) -> list[Event]:
        """Return events carrying ``tag``, ignoring case and surrounding whitespace."""
        if tag is None or not tag.strip():
            raise InvalidArgumentError("Tag must not be null or blank")
        normalized = tag.strip().lower()
        matches = [e for e in self._store.find_all() if e.has_tag(normalized)]
        logger.debug("Found %d events tagged %r", len(matches), normalized)
        return matches

    def get_upcoming_events(self) -> list[Event]:
        """Return events scheduled strictly after now. Undated events are skipped."""
        now = self._clock()
        return [
            e
            for e in self._store.find_all()
            if e.event_date_time is not None and e.event_date_time > now
        ]

    def get_events_by_price_range(
        self, min_price: Decimal | None, max_price: Decimal | None
    ) -> list[Event]:
        """Return priced events with ``min_price <= price <= max_price``.

        Raises:
            InvalidArgumentError: If a bound is None or min_price > max_price.
        """
        if min_price is None or max_price is None:
            raise InvalidArgumentError("min_price and max_price must not be null")
        if min_price > max_price:
            raise InvalidArgumentError("min_price must be <= max_price")
        matches = [
            e
            for e in self._store.find_all()
            if e.ticket_price is not None and min_price <= e.ticket_price.amount <= max_price
        ]
        logger.debug("Found %d events priced in [%s, %s]", len(matches), min_price, max_price)
        return matches

    def get_events_by_date_range(
        self, start: datetime | None, end: datetime | None
    ) -> list[Event]:
        """Return dated events with ``start <= event_date_time <= end``.

        Raises:
            InvalidArgumentError: If a bound is None or naive, or start is after end.
        """
        if start is None or end is None:
            raise InvalidArgumentError("start and end must not be null")
        if start.tzinfo is None or end.tzinfo is None:
            raise InvalidArgumentError("start and end must be timezone-aware")
        if start > end:
            raise InvalidArgumentError("start must be <= end")
        matches = [
            e
            for e in self._store.find_all()
            if e.event_date_time is not None and start <= e.event_date_time <= end
        ]
        logger.debug("Found %d events between %s and %s", len(matches), start, end)
        return matches

    def update_event_price(self, event_id: EventIdLike | None, new_price: Decimal | None) -> Event:
        """Set the ticket price of an existing event.

        Raises:
            InvalidArgumentError: If event_id or new_price is None, or new_price is negative.
            EventNotFoundError: If the event does not exist.
        """
        if event_id is None:
            raise InvalidArgumentError("Id must not be null")
        if new_price is None:
            raise InvalidArgumentError("New price must not be null")
        if new_price < 0:
            raise InvalidArgumentError("New price must be >= 0")
        existing = self._require(_parse_event_id(event_id))
        saved = self._store.save(
            dataclasses.replace(existing, ticket_price=Money(amount=Decimal(new_price)))
        )
        logger.info("Repriced event %s to %s", existing.id, saved.ticket_price)
        return saved

    def _require(self, event_id: EventId) -> Event:
        event = self._store.find_by_id(event_id)
        if event is None:
            logger.warning("Event %s not found", event_id)
            raise EventNotFoundError(str(event_id))
        return event

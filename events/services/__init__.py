from events.services.event_service import EventService

__all__ = ["EventService", "build_event_service"]


def build_event_service() -> EventService:
    """Return an EventService backed by the Django ORM store."""
    from events.stores.django_store import DjangoEventStore

    return EventService(DjangoEventStore())

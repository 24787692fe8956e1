from events.handlers.serializers import EventSerializer

__all__ = ["EventSerializer"]

"""Serializers for moving Event domain models in and out of primitive payloads.

Input direction: ``EventSerializer(data=payload)`` validates the payload and
``to_domain()`` builds an ``Event`` from it. With ``partial=True`` only the
supplied fields are set, which is the shape ``partial_update_event`` expects.

Output direction: ``EventSerializer(event).data`` renders a domain ``Event``.
"""

from rest_framework import serializers

from events.domain import Event, Money


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(max_length=255, required=False, allow_null=True)
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
    )
    ticket_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True,
    )
    event_date_time = serializers.DateTimeField(required=False, allow_null=True)
    duration_minutes = serializers.IntegerField(min_value=1, required=False, allow_null=True)

    def to_domain(self) -> Event:
        """Build an Event from validated data. Call ``is_valid()`` first."""
        data = dict(self.validated_data)
        if "tags" in data:
            data["tags"] = tuple(data["tags"])
        if data.get("ticket_price") is not None:
            data["ticket_price"] = Money(amount=data["ticket_price"])
        try:
            return Event(**data)
        except ValueError as e:
            raise serializers.ValidationError(str(e)) from e

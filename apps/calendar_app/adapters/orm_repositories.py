# apps/calendar_app/adapters/orm_repositories.py
from datetime import date
from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError

from apps.calendar_app.domain.entities import CalendarEventEntity
from apps.calendar_app.models import CalendarEvent as EventModel
from apps.calendar_app.ports.event_store import IEventRepository


class DjangoEventRepository(IEventRepository):
    def to_entity(self, model: EventModel) -> CalendarEventEntity:
        return CalendarEventEntity(
            id=model.id,
            title=model.title,
            date=model.date,
            time=model.time,
            notes=model.notes,
        )

    def list_events(self, user_id: int, start: Optional[date] = None, end: Optional[date] = None) -> List[CalendarEventEntity]:
        qs = EventModel.objects.filter(user_id=user_id)
        # Both bounds inclusive
        if start:
            qs = qs.filter(date__gte=start)
        if end:
            qs = qs.filter(date__lte=end)
        return [self.to_entity(e) for e in qs]

    def add(self, event: CalendarEventEntity, user_id: int) -> CalendarEventEntity:
        # Re-adding an event updates it, but only for its owner
        if EventModel.objects.filter(id=event.id).exclude(user_id=user_id).exists():
            raise ValueError(f"Event {event.id} belongs to another user")
        obj, _ = EventModel.objects.update_or_create(
            id=event.id,
            user_id=user_id,
            defaults={
                'title': event.title,
                'date': event.date,
                'time': event.time,
                'notes': event.notes,
            }
        )
        return self.to_entity(obj)

    def delete(self, event_id: UUID, user_id: int) -> bool:
        try:
            deleted, _ = EventModel.objects.filter(id=event_id, user_id=user_id).delete()
        except ValidationError:
            return False
        return deleted > 0

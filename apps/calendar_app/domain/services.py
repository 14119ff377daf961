# apps/calendar_app/domain/services.py
from datetime import date, datetime, time
from typing import Iterable, List

import pytz
from django.conf import settings

from apps.calendar_app.domain.entities import CalendarEventEntity


def sort_events(events: Iterable[CalendarEventEntity]) -> List[CalendarEventEntity]:
    return sorted(events, key=lambda e: (e.date, e.time, e.title))


def events_for_day(events: Iterable[CalendarEventEntity], day: date) -> List[CalendarEventEntity]:
    """Events falling on `day`, earliest first."""
    return sort_events(e for e in events if e.date == day)


def event_start(event: CalendarEventEntity, tz_name: str = None) -> datetime:
    """Date + time of the event as an aware datetime in `tz_name` (TIME_ZONE by default)."""
    tz = pytz.timezone(tz_name or settings.TIME_ZONE)
    return tz.localize(datetime.combine(event.date, event.time))


class EventService:
    def build_event(self, title: str, day: date, at: time = None, notes: str = "") -> CalendarEventEntity:
        if not title or not title.strip():
            raise ValueError("Event title cannot be empty")
        return CalendarEventEntity(
            title=title.strip(),
            date=day,
            time=at or time(0, 0),
            notes=(notes or "").strip(),
        )

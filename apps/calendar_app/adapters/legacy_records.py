# apps/calendar_app/adapters/legacy_records.py
from datetime import datetime
from typing import List

from apps.calendar_app.domain.entities import CalendarEventEntity
from apps.core import records

EVENTS_KEY = "calendarEvents"


def event_from_record(record: dict) -> CalendarEventEntity:
    tz = records.local_timezone()
    day = records.parse_record_date(record['date'])
    at = records.parse_record_date(record['time'])
    if day is None or at is None:
        raise ValueError("Event date and time are required")
    return CalendarEventEntity(
        id=records.parse_uuid(record['id']),
        title=str(record['title']),
        date=day.astimezone(tz).date(),
        time=at.astimezone(tz).time().replace(second=0, microsecond=0),
        notes=str(record.get('notes') or ''),
    )


def event_to_record(event: CalendarEventEntity) -> dict:
    tz = records.local_timezone()
    midnight = tz.localize(datetime.combine(event.date, datetime.min.time()))
    start = tz.localize(datetime.combine(event.date, event.time))
    return {
        'id': records.format_uuid(event.id),
        'title': event.title,
        'date': records.format_record_date(midnight),
        'notes': event.notes,
        'time': records.format_record_date(start),
    }


def load_events(blob) -> List[CalendarEventEntity]:
    return records.load_collection(blob, event_from_record, name=EVENTS_KEY)


def dump_events(events: List[CalendarEventEntity]) -> str:
    return records.dump_collection(events, event_to_record)

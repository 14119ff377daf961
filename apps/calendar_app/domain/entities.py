# apps/calendar_app/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, time
from uuid import UUID, uuid4


@dataclass
class CalendarEventEntity:
    title: str
    date: date
    time: time
    notes: str = ""
    id: UUID = field(default_factory=uuid4)

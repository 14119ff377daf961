# apps/calendar_app/ports/event_store.py
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from apps.calendar_app.domain.entities import CalendarEventEntity


class IEventRepository(ABC):
    @abstractmethod
    def list_events(self, user_id: int, start: Optional[date] = None, end: Optional[date] = None) -> List[CalendarEventEntity]:
        """Events of the user, optionally limited to [start, end] (inclusive)."""
        pass

    @abstractmethod
    def add(self, event: CalendarEventEntity, user_id: int) -> CalendarEventEntity:
        """Creates or updates the event; ValueError if the id is owned by someone else."""
        pass

    @abstractmethod
    def delete(self, event_id: UUID, user_id: int) -> bool:
        pass

# apps/goals/domain/entities.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class GoalUnit(str, Enum):
    # Quantities
    PIECES = 'шт'
    PACKS = 'уп'
    KILOGRAMS = 'кг'
    LITERS = 'л'
    METERS = 'м'

    # Money
    EURO = '€'
    DOLLAR = '$'
    RUBLE = '₽'
    TENGE = '₸'

    # Time
    DAYS = 'дн'
    WEEKS = 'нед'
    MONTHS = 'мес'
    HOURS = 'ч'


def parse_amount(text) -> int:
    """
    Coerces free-text numeric input to a non-negative integer.
    Anything that is not a plain integer (empty, '12.5', 'abc', '-3') becomes 0.
    """
    if text is None or isinstance(text, bool):
        return 0
    if isinstance(text, int):
        return max(text, 0)
    try:
        value = int(str(text).strip())
    except ValueError:
        return 0
    return max(value, 0)


@dataclass
class GoalEntity:
    text: str
    total_number: str  # amounts are persisted as strings
    remaining_number: str
    unit: GoalUnit = GoalUnit.PIECES
    is_completed: bool = False
    scale: int = 1
    id: UUID = field(default_factory=uuid4)
    project_id: Optional[UUID] = None

    @property
    def total(self) -> int:
        return parse_amount(self.total_number)

    @property
    def remaining(self) -> int:
        return parse_amount(self.remaining_number)

    @property
    def completed_amount(self) -> int:
        return max(self.total - self.remaining, 0)

    @property
    def progress_label(self) -> str:
        """E.g. '25/100$'."""
        return f"{self.completed_amount}/{self.total}{self.unit.value}"

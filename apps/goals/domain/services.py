# apps/goals/domain/services.py
from dataclasses import replace

from django.conf import settings

from apps.goals.domain.entities import GoalEntity, GoalUnit, parse_amount

# (upper bound of the tier, units per cell)
SCALE_TIERS = (
    (10_000, 1),
    (100_000, 10),
    (1_000_000, 100),
    (10_000_000, 1_000),
)
MAX_SCALE = 10_000

# 100 000 cells at the top scale
MAX_GOAL_TOTAL = 1_000_000_000


def compute_scale(total: int) -> int:
    """How many goal units a single grid cell stands for."""
    for upper_bound, scale in SCALE_TIERS:
        if total <= upper_bound:
            return scale
    return MAX_SCALE


def max_goal_total() -> int:
    return getattr(settings, 'SPLITUP_MAX_GOAL_TOTAL', MAX_GOAL_TOTAL)


def check_goal_total(total: int):
    """Raises ValueError for totals the grid cannot hold."""
    limit = max_goal_total()
    if total > limit:
        raise ValueError(f"Goal total cannot exceed {limit}")


def cell_count(goal: GoalEntity) -> int:
    """ceil(total / scale); zero for an empty or non-numeric total."""
    total = goal.total
    if total <= 0:
        return 0
    scale = max(goal.scale or 1, 1)
    return -(-total // scale)


def total_cell_count(goals) -> int:
    return sum(cell_count(g) for g in goals)


def build_goal(text: str, amount_text: str, unit: GoalUnit = GoalUnit.PIECES) -> GoalEntity:
    """New goal: remaining starts at the total, scale derived from the total."""
    total = parse_amount(amount_text)
    return GoalEntity(
        text=text,
        total_number=str(total),
        remaining_number=str(total),
        unit=GoalUnit(unit),
        is_completed=False,
        scale=compute_scale(total),
    )


def redefine_goal(goal: GoalEntity, text: str, amount_text: str, unit: GoalUnit) -> GoalEntity:
    """
    Editing a goal starts it over: remaining resets to the new total and the
    completion flag is cleared. The id is kept so the goal stays in place.
    """
    fresh = build_goal(text, amount_text, unit)
    return replace(fresh, id=goal.id, project_id=goal.project_id)

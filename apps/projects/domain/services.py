# apps/projects/domain/services.py
import math
import random
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.services import cell_count, total_cell_count
from apps.projects.domain.entities import CellEntity


def colored_count(cells: Iterable[CellEntity]) -> int:
    return sum(1 for c in cells if c.is_colored)


def rebuild_grid(goals: List[GoalEntity], previous_cells: Iterable[CellEntity]) -> List[CellEntity]:
    """
    Builds a fresh grid for the goal set. A position colored before stays
    colored as long as it still exists; positions past the new size are dropped.
    """
    total = total_cell_count(goals)
    colored = {c.position for c in previous_cells if c.is_colored}
    return [CellEntity(position=p, is_colored=p in colored) for p in range(total)]


def cells_to_fill(goal: GoalEntity, amount: int) -> int:
    """ceil(cell_count * amount / total)."""
    total = goal.total
    if total <= 0 or amount <= 0:
        return 0
    return -(-(cell_count(goal) * amount) // total)


def apply_progress(
    goal: GoalEntity,
    amount: int,
    cells: List[CellEntity],
    rng: Optional[random.Random] = None,
) -> Tuple[List[CellEntity], GoalEntity]:
    """
    Credits `amount` units to the goal and colors a matching share of the
    still-uncolored cells, picked uniformly at random without replacement.

    Amounts outside 1..remaining leave everything untouched. Each call
    compounds, so a single user action must be applied exactly once.
    Returns new objects; the arguments are not modified.
    """
    remaining = goal.remaining
    if goal.total <= 0 or amount <= 0 or amount > remaining:
        return list(cells), goal

    rng = rng or random.Random()
    uncolored = [c.position for c in cells if not c.is_colored]
    picked = set(rng.sample(uncolored, min(cells_to_fill(goal, amount), len(uncolored))))

    updated_cells = [
        replace(c, is_colored=True) if c.position in picked else c
        for c in cells
    ]
    new_remaining = remaining - amount
    updated_goal = replace(
        goal,
        remaining_number=str(new_remaining),
        is_completed=new_remaining == 0,
    )
    return updated_cells, updated_goal


def mark_goal_complete(
    goal: GoalEntity,
    cells: List[CellEntity],
    rng: Optional[random.Random] = None,
) -> Tuple[List[CellEntity], GoalEntity]:
    return apply_progress(goal, goal.remaining, cells, rng=rng)


def grid_dimensions(total_cells: int) -> Tuple[int, int]:
    """(rows, columns) of the most square layout holding `total_cells`."""
    if total_cells <= 0:
        return 0, 0
    columns = math.isqrt(total_cells)
    if columns * columns < total_cells:
        columns += 1
    rows = -(-total_cells // columns)
    return rows, columns


def cell_coordinates(position: int, columns: int) -> Tuple[int, int]:
    return position // columns, position % columns

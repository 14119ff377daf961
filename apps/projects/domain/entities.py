# apps/projects/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from apps.goals.domain.entities import GoalEntity

UNTITLED_PROJECT = "Untitled"


@dataclass(frozen=True)
class CellEntity:
    position: int  # index in the flattened row-major grid
    is_colored: bool = False


@dataclass
class ProjectEntity:
    """State of one editing session: image, goals and the grid over the image."""
    id: Optional[UUID]  # None until the first save
    project_name: str = ""
    image_data: bytes = b""
    thumbnail_data: bytes = b""
    goals: List[GoalEntity] = field(default_factory=list)
    cells: List[CellEntity] = field(default_factory=list)
    show_grid: bool = False
    deadline: Optional[datetime] = None

    @property
    def colored_count(self) -> int:
        return sum(1 for c in self.cells if c.is_colored)

    @property
    def display_name(self) -> str:
        if self.project_name:
            return self.project_name
        if self.goals and self.goals[0].text:
            return self.goals[0].text
        return UNTITLED_PROJECT

    def find_goal(self, goal_id) -> Optional[GoalEntity]:
        for goal in self.goals:
            if goal.id == goal_id:
                return goal
        return None


@dataclass
class ProjectSummary:
    """Gallery row."""
    id: UUID
    project_name: str
    goal_count: int
    colored_cells: int
    total_cells: int
    show_grid: bool
    deadline: Optional[datetime] = None

# apps/projects/application/use_cases.py
import random
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from apps.goals.domain.entities import GoalEntity, GoalUnit, parse_amount
from apps.goals.domain.services import build_goal, check_goal_total, redefine_goal
from apps.projects.adapters.images import make_thumbnail
from apps.projects.domain.entities import ProjectEntity, ProjectSummary
from apps.projects.domain.services import (
    apply_progress,
    colored_count,
    mark_goal_complete,
    rebuild_grid,
)
from apps.projects.ports.repositories import IProjectRepository
from apps.projects import signals


class ProjectNotFound(LookupError):
    pass


class ProjectUseCase:
    def __init__(self, repository: IProjectRepository, rng: Optional[random.Random] = None):
        self.repository = repository
        self.rng = rng

    def load(self, project_id: UUID, user_id: int) -> ProjectEntity:
        project = self.repository.get_by_id(project_id, user_id=user_id)
        if project is None:
            raise ProjectNotFound(f"Project {project_id} not found")
        return project

    def load_for_goal(self, goal_id: UUID, user_id: int):
        project_id = self.repository.get_project_id_for_goal(goal_id)
        if project_id is None:
            raise ProjectNotFound(f"Goal {goal_id} not found")
        project = self.load(project_id, user_id)
        return project, project.find_goal(goal_id)

    def regrid(self, project: ProjectEntity) -> ProjectEntity:
        # Colored positions survive, the size follows the goals
        project.cells = rebuild_grid(project.goals, project.cells)
        project = self.repository.save(project)
        signals.grid_rebuilt.send(sender=self.__class__, project=project)
        return project


# --- Saving / loading ------------------------------------------------------

@dataclass
class SaveProjectInput:
    user_id: int
    project_id: Optional[UUID] = None
    image_data: Optional[bytes] = None  # None keeps the stored image
    project_name: Optional[str] = None
    deadline: Optional[datetime] = None


class SaveProjectUseCase(ProjectUseCase):
    """Creates a project on first save; later saves update it in place (matched by id)."""

    def execute(self, input_dto: SaveProjectInput) -> ProjectEntity:
        if input_dto.project_id is None:
            if not input_dto.image_data:
                raise ValueError("An image is required to start a project")
            project = ProjectEntity(id=None)
        else:
            project = self.load(input_dto.project_id, input_dto.user_id)

        created = project.id is None
        # Only the fields that were sent are changed
        if input_dto.image_data is not None:
            project.image_data = input_dto.image_data
        if input_dto.project_name is not None:
            project.project_name = input_dto.project_name.strip()
        if input_dto.deadline is not None:
            project.deadline = input_dto.deadline

        # Empty name: first goal text, then "Untitled"
        project.project_name = project.display_name
        # The preview always follows the current image
        project.thumbnail_data = make_thumbnail(project.image_data)

        saved = self.repository.save(project, user_id=input_dto.user_id)
        signals.project_saved.send(sender=self.__class__, project=saved, created=created)
        return saved


class LoadProjectUseCase(ProjectUseCase):
    def execute(self, project_id: UUID, user_id: int) -> ProjectEntity:
        return self.load(project_id, user_id)


class DeleteProjectUseCase(ProjectUseCase):
    def execute(self, project_id: UUID, user_id: int) -> None:
        if not self.repository.delete(project_id, user_id=user_id):
            raise ProjectNotFound(f"Project {project_id} not found")
        signals.project_deleted.send(sender=self.__class__, project_id=project_id)


class ListProjectsUseCase(ProjectUseCase):
    def execute(self, user_id: int) -> List[ProjectSummary]:
        return self.repository.list_summaries(user_id)


class DivideImageUseCase(ProjectUseCase):
    """Shows the grid over the image, (re)building it from the current goals."""

    def execute(self, project_id: UUID, user_id: int) -> ProjectEntity:
        project = self.load(project_id, user_id)
        if not project.goals:
            raise ValueError("Add at least one goal before dividing the image")
        project.show_grid = True
        return self.regrid(project)


# --- Goals -----------------------------------------------------------------

@dataclass
class GoalInput:
    user_id: int
    text: str
    amount_text: str
    unit: GoalUnit = GoalUnit.PIECES


def _validate_goal_input(input_dto: GoalInput):
    if not input_dto.text or not input_dto.text.strip():
        raise ValueError("Goal text cannot be empty")
    if not str(input_dto.amount_text or "").strip():
        raise ValueError("Goal amount cannot be empty")
    check_goal_total(parse_amount(input_dto.amount_text))


class AddGoalUseCase(ProjectUseCase):
    def execute(self, project_id: UUID, input_dto: GoalInput) -> GoalEntity:
        _validate_goal_input(input_dto)
        project = self.load(project_id, input_dto.user_id)

        goal = build_goal(input_dto.text.strip(), input_dto.amount_text, input_dto.unit)
        # Owning project id, as the repository expects
        goal.project_id = project.id
        project.goals.append(goal)

        self.regrid(project)
        return goal


class EditGoalUseCase(ProjectUseCase):
    """Redefines a goal; its progress starts over and the grid is rebuilt."""

    def execute(self, goal_id: UUID, input_dto: GoalInput) -> GoalEntity:
        _validate_goal_input(input_dto)
        project, goal = self.load_for_goal(goal_id, input_dto.user_id)

        updated = redefine_goal(goal, input_dto.text.strip(), input_dto.amount_text, input_dto.unit)
        # Same slot in the list, so the goal order does not change
        project.goals = [updated if g.id == goal_id else g for g in project.goals]

        self.regrid(project)
        return updated


class DeleteGoalUseCase(ProjectUseCase):
    def execute(self, goal_id: UUID, user_id: int) -> ProjectEntity:
        project, _ = self.load_for_goal(goal_id, user_id)
        project.goals = [g for g in project.goals if g.id != goal_id]
        return self.regrid(project)


# --- Progress --------------------------------------------------------------

@dataclass
class ProgressResult:
    project: ProjectEntity
    goal: GoalEntity
    newly_colored: int


class RecordProgressUseCase(ProjectUseCase):
    """
    Credits an amount to a goal and reveals the matching share of cells.
    Must run exactly once per user action: every call compounds.
    """

    def execute(self, goal_id: UUID, user_id: int, amount) -> ProgressResult:
        project, goal = self.load_for_goal(goal_id, user_id)
        amount = parse_amount(amount)
        # Rejected amounts never reach the grid
        self._check(project, goal, amount)

        # Counted before, so the result reports only the newly revealed cells
        before = colored_count(project.cells)
        cells, updated_goal = apply_progress(goal, amount, project.cells, rng=self.rng)
        return self._store(project, cells, updated_goal, amount, before)

    def _check(self, project: ProjectEntity, goal: GoalEntity, amount: int):
        if not project.show_grid:
            raise ValueError("Divide the image before recording progress")
        if goal.is_completed:
            raise ValueError(f"Goal '{goal.text}' is already completed")
        if amount < 1 or amount > goal.remaining:
            raise ValueError(f"Amount must be between 1 and {goal.remaining}")

    def _store(self, project, cells, updated_goal, amount, colored_before) -> ProgressResult:
        # Cells and goal are saved together (one transaction in the repository)
        project.cells = cells
        project.goals = [updated_goal if g.id == updated_goal.id else g for g in project.goals]
        project = self.repository.save(project)

        newly_colored = project.colored_count - colored_before
        signals.progress_recorded.send(
            sender=self.__class__,
            project=project,
            goal=updated_goal,
            amount=amount,
            newly_colored=newly_colored,
        )
        return ProgressResult(project=project, goal=updated_goal, newly_colored=newly_colored)


class CompleteGoalUseCase(RecordProgressUseCase):
    """Marks whatever is left of the goal as done."""

    def execute(self, goal_id: UUID, user_id: int) -> ProgressResult:
        project, goal = self.load_for_goal(goal_id, user_id)
        remaining = goal.remaining
        self._check(project, goal, remaining)

        before = colored_count(project.cells)
        cells, updated_goal = mark_goal_complete(goal, project.cells, rng=self.rng)
        return self._store(project, cells, updated_goal, remaining, before)

# apps/projects/adapters/orm_repositories.py
import logging
from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count, Q

from apps.goals.domain.entities import GoalEntity, GoalUnit
from apps.goals.models import Goal as GoalModel
from apps.projects.domain.entities import CellEntity, ProjectEntity, ProjectSummary
from apps.projects.models import Cell as CellModel
from apps.projects.models import Project as ProjectModel
from apps.projects.ports.repositories import IProjectRepository

logger = logging.getLogger(__name__)


class DjangoProjectRepository(IProjectRepository):
    def goal_to_entity(self, model: GoalModel) -> GoalEntity:
        return GoalEntity(
            id=model.id,
            project_id=model.project_id,
            text=model.text,
            total_number=model.total_number,
            remaining_number=model.remaining_number,
            is_completed=model.is_completed,
            unit=GoalUnit(model.unit),
            scale=model.scale,
        )

    def to_entity(self, model: ProjectModel) -> ProjectEntity:
        """Django model -> domain entity (goals and cells included)."""
        return ProjectEntity(
            id=model.id,
            project_name=model.project_name,
            image_data=bytes(model.image_data or b""),
            thumbnail_data=bytes(model.thumbnail_data or b""),
            goals=[self.goal_to_entity(g) for g in model.goals.all()],
            cells=[
                CellEntity(position=position, is_colored=is_colored)
                for position, is_colored in model.cells.values_list('position', 'is_colored')
            ],
            show_grid=model.show_grid,
            deadline=model.deadline,
        )

    def _queryset(self, user_id: int = None):
        # No user_id: unscoped access (commands, internal lookups)
        qs = ProjectModel.objects.all()
        if user_id is not None:
            qs = qs.filter(user_id=user_id)
        return qs

    def get_by_id(self, project_id: UUID, user_id: int = None) -> Optional[ProjectEntity]:
        try:
            project = self._queryset(user_id).get(id=project_id)
            return self.to_entity(project)
        except (ProjectModel.DoesNotExist, ValidationError):
            return None

    @transaction.atomic
    def save(self, project: ProjectEntity, user_id: int = None) -> ProjectEntity:
        data = {
            'project_name': project.display_name,
            'image_data': project.image_data,
            'thumbnail_data': project.thumbnail_data,
            'show_grid': project.show_grid,
            'deadline': project.deadline,
        }

        obj = None
        if project.id:
            obj = ProjectModel.objects.filter(id=project.id).first()

        if obj is not None:
            # Ids come from the client (uploads, imports), never take over a foreign row
            if user_id is not None and obj.user_id != user_id:
                raise ValueError(f"Project {project.id} belongs to another user")
            ProjectModel.objects.filter(id=obj.id).update(**data)
        else:
            # A project is created on its first save and needs an owner
            if user_id is None:
                raise ValueError("user_id is required for creating a new project")
            create_kwargs = dict(user_id=user_id, **data)
            if project.id:
                create_kwargs['id'] = project.id
            obj = ProjectModel.objects.create(**create_kwargs)
            logger.info("Created project %s for user %s", obj.id, user_id)

        self._replace_goals(obj, project.goals)
        self._replace_cells(obj, project.cells)

        return self.to_entity(ProjectModel.objects.get(id=obj.id))

    def _replace_goals(self, obj: ProjectModel, goals: List[GoalEntity]):
        keep_ids = [g.id for g in goals]
        # A goal id already used by another project cannot be moved here
        if GoalModel.objects.filter(id__in=keep_ids).exclude(project=obj).exists():
            raise ValueError(f"Project {obj.id} refers to goals of another project")
        GoalModel.objects.filter(project=obj).exclude(id__in=keep_ids).delete()

        for order, goal in enumerate(goals):
            GoalModel.objects.update_or_create(
                id=goal.id,
                project=obj,
                defaults={
                    'text': goal.text,
                    'total_number': goal.total_number,
                    'remaining_number': goal.remaining_number,
                    'is_completed': goal.is_completed,
                    'unit': GoalUnit(goal.unit).value,
                    'scale': goal.scale,
                    'order': order,
                }
            )

    def _replace_cells(self, obj: ProjectModel, cells: List[CellEntity]):
        # The grid is always rewritten as a whole (position-keyed)
        CellModel.objects.filter(project=obj).delete()
        CellModel.objects.bulk_create(
            [CellModel(project=obj, position=c.position, is_colored=c.is_colored) for c in cells],
            batch_size=1000
        )

    def delete(self, project_id: UUID, user_id: int = None) -> bool:
        try:
            deleted, _ = self._queryset(user_id).filter(id=project_id).delete()
        except ValidationError:
            return False
        return deleted > 0

    def list_summaries(self, user_id: int) -> List[ProjectSummary]:
        qs = (
            self._queryset(user_id)
            # Images are not needed for the gallery list
            .defer('image_data', 'thumbnail_data')
            .annotate(
                goal_count=Count('goals', distinct=True),
                total_cells=Count('cells', distinct=True),
                colored_cells=Count('cells', filter=Q(cells__is_colored=True), distinct=True),
                # distinct: goals and cells are joined in the same query
            )
        )
        return [
            ProjectSummary(
                id=p.id,
                project_name=p.project_name,
                goal_count=p.goal_count,
                colored_cells=p.colored_cells,
                total_cells=p.total_cells,
                show_grid=p.show_grid,
                deadline=p.deadline,
            )
            for p in qs
        ]

    def get_project_id_for_goal(self, goal_id: UUID) -> Optional[UUID]:
        try:
            return GoalModel.objects.values_list('project_id', flat=True).get(id=goal_id)
        except (GoalModel.DoesNotExist, ValidationError):
            return None

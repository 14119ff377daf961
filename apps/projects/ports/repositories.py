# apps/projects/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from apps.projects.domain.entities import ProjectEntity, ProjectSummary


class IProjectRepository(ABC):
    @abstractmethod
    def get_by_id(self, project_id: UUID, user_id: int = None) -> Optional[ProjectEntity]:
        """None when the project does not exist or belongs to another user."""
        pass

    @abstractmethod
    def save(self, project: ProjectEntity, user_id: int = None) -> ProjectEntity:
        """
        Creates the project when its id is unknown, otherwise replaces it in place.
        Raises ValueError when the id (or one of its goal ids) belongs to another owner.
        """
        pass

    @abstractmethod
    def delete(self, project_id: UUID, user_id: int = None) -> bool:
        pass

    @abstractmethod
    def list_summaries(self, user_id: int) -> List[ProjectSummary]:
        pass

    @abstractmethod
    def get_project_id_for_goal(self, goal_id: UUID) -> Optional[UUID]:
        pass

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
from src.domain import Project, ProjectStatus, ProjectCategory, ProjectScope


class ProjectRepository(ABC):
    """Repository interface for Project entity"""

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def list_open(
        self,
        offset: int,
        limit: int,
        category: Optional[ProjectCategory] = None,
        scope: Optional[ProjectScope] = None,
    ) -> Tuple[List[Project], int]:
        """Get a page of OPEN projects, newest first, with the total count"""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[Project]:
        """Get all projects posted by a business owner, newest first"""
        pass

    @abstractmethod
    async def list_completed_by_student(self, account_id: str) -> List[Project]:
        """Get projects completed by an account, most recently completed first"""
        pass

    @abstractmethod
    async def compare_and_set_status(
        self, project_id: str, expected_status: ProjectStatus, changes: Dict[str, Any]
    ) -> bool:
        """
        Write changes only if the stored status still equals expected_status.

        Returns:
            bool: False when a concurrent writer changed the status first
        """
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Permanently delete a project"""
        pass

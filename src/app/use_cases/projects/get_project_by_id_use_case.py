from typing import Optional
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain import Actor, Project, ProjectStatus
from .dtos import ProjectDTO

# Visible to everyone; other statuses only to the owner
PUBLIC_STATUSES = frozenset(
    {
        ProjectStatus.OPEN,
        ProjectStatus.ASSIGNED,
        ProjectStatus.IN_PROGRESS,
        ProjectStatus.IN_REVIEW,
        ProjectStatus.COMPLETED,
    }
)


def is_visible_to(project: Project, actor: Optional[Actor]) -> bool:
    if project.status in PUBLIC_STATUSES:
        return True
    return actor is not None and project.is_owned_by(actor.account_id)


class GetProjectByIdUseCase:
    """Use case for getting a single project by ID"""

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor] = None):
        self.uow = uow
        self.actor = actor

    async def execute(self, project_id: str) -> Result[ProjectDTO]:
        """
        Execute the get project by ID use case

        Args:
            project_id: ID of the project to retrieve

        Returns:
            Result[ProjectDTO]: Success with project data or error
        """
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)

            # Drafts, archived and cancelled projects look missing to anyone but the owner
            if project is None or not is_visible_to(project, self.actor):
                return Return.err(Error(code="NOT_FOUND", message="Project not found"))

            return Return.ok(ProjectDTO.from_entity(project))

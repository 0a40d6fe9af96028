"""
List Applications Use Cases

Owner view of the applications to one project and applicant view of the
actor's own applications.
"""
from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.authorization import Capability, require, require_owner
from src.domain import Actor, ApplicationStatus
from .dtos import ApplicationDTO, ListApplicationsResponseDTO


class ListProjectApplicationsUseCase:
    """Applications to a project, oldest first, visible to its owner only"""

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor]):
        self.uow = uow
        self.actor = actor

    async def execute(self, project_id: str) -> Result[ListApplicationsResponseDTO]:
        error = require(self.actor, Capability.REVIEW_APPLICATIONS)
        if error:
            return Return.err(error)

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            error = require_owner(self.actor, project)
            if error:
                return Return.err(error)

            applications = await self.uow.applications.list_by_project(project_id)
            return Return.ok(
                ListApplicationsResponseDTO(
                    applications=[ApplicationDTO.from_entity(a) for a in applications]
                )
            )


class ListMyApplicationsUseCase:
    """The actor's own applications, pending first, then most recently changed"""

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor]):
        self.uow = uow
        self.actor = actor

    async def execute(self) -> Result[ListApplicationsResponseDTO]:
        error = require(self.actor, Capability.VIEW_OWN_APPLICATIONS)
        if error:
            return Return.err(error)

        async with self.uow:
            applications = await self.uow.applications.list_by_applicant(self.actor.account_id)

        applications = sorted(applications, key=lambda a: a.status_changed_at, reverse=True)
        applications.sort(key=lambda a: a.status != ApplicationStatus.PENDING)

        return Return.ok(
            ListApplicationsResponseDTO(
                applications=[ApplicationDTO.from_entity(a) for a in applications]
            )
        )

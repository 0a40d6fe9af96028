from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require, require_owner
from src.domain import Actor
from src.domain.enums import value_of
from src.domain.lifecycle import check_deletable
from .dtos import DeleteProjectResponse


class DeleteProjectUseCase:
    """
    Use case for permanently deleting a project.

    Only allowed while the project is DRAFT or OPEN; its applications are
    deleted with it. Anything further along must be archived or cancelled.
    """

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor], audit_service: AuditService):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service

    async def execute(self, project_id: str) -> Result[DeleteProjectResponse]:
        error = require(self.actor, Capability.MANAGE_PROJECT)
        if error:
            return Return.err(error)

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)

            error = require_owner(self.actor, project)
            if error:
                return Return.err(error)

            error = check_deletable(project)
            if error:
                return Return.err(error)

            status = value_of(project.status)
            await self.uow.applications.delete_by_project(project.id)
            await self.uow.projects.delete(project)
            await self.uow.commit()

            await record_event(
                self.audit_service,
                event_type="project_deleted",
                actor_id=self.actor.account_id,
                resource_type="project",
                resource_id=project_id,
                metadata={"status": status, "title": project.title},
            )

            return Return.ok(DeleteProjectResponse(id=project_id))

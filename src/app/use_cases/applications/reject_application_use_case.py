"""
Reject Application Use Case

The project owner rejects a pending application. There is no precondition
on the project status, so stale applications can be cleaned up at any time.
"""
from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require, require_owner
from src.domain import Actor, ApplicationStatus
from src.domain.lifecycle import check_rejectable
from .dtos import ApplicationDTO
from .status_change import status_changed_concurrently


class RejectApplicationUseCase:

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor], audit_service: AuditService):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service

    async def execute(self, application_id: str) -> Result[ApplicationDTO]:
        error = require(self.actor, Capability.REVIEW_APPLICATIONS)
        if error:
            return Return.err(error)

        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            project = None
            if application is not None:
                project = await self.uow.projects.get_by_id(application.project_id)

            error = require_owner(self.actor, project)
            if error:
                return Return.err(error)

            error = check_rejectable(application)
            if error:
                return Return.err(error)

            application.reject(datetime.utcnow())
            updated = await self.uow.applications.compare_and_set_status(
                application.id,
                ApplicationStatus.PENDING,
                {
                    "status": application.status,
                    "status_changed_at": application.status_changed_at,
                    "seen_by_applicant": application.seen_by_applicant,
                },
            )
            if not updated:
                await self.uow.rollback()
                return Return.err(status_changed_concurrently())
            await self.uow.commit()

            await record_event(
                self.audit_service,
                event_type="application_rejected",
                actor_id=self.actor.account_id,
                resource_type="application",
                resource_id=application.id,
                metadata={"project_id": application.project_id},
            )

            return Return.ok(ApplicationDTO.from_entity(application))

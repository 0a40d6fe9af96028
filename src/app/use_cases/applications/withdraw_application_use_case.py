"""
Withdraw Application Use Case

The applicant withdraws a pending application. The row is kept with status
WITHDRAWN; it no longer counts as active, so the applicant may apply again.
"""
from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require, require_applicant
from src.domain import Actor, ApplicationStatus
from src.domain.lifecycle import check_withdrawable
from .dtos import ApplicationDTO
from .status_change import status_changed_concurrently


class WithdrawApplicationUseCase:

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor], audit_service: AuditService):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service

    async def execute(self, application_id: str) -> Result[ApplicationDTO]:
        error = require(self.actor, Capability.SUBMIT_APPLICATION)
        if error:
            return Return.err(error)

        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)

            error = require_applicant(self.actor, application)
            if error:
                return Return.err(error)

            error = check_withdrawable(application)
            if error:
                return Return.err(error)

            application.withdraw(datetime.utcnow())
            updated = await self.uow.applications.compare_and_set_status(
                application.id,
                ApplicationStatus.PENDING,
                {
                    "status": application.status,
                    "status_changed_at": application.status_changed_at,
                },
            )
            if not updated:
                await self.uow.rollback()
                return Return.err(status_changed_concurrently())
            await self.uow.commit()

            await record_event(
                self.audit_service,
                event_type="application_withdrawn",
                actor_id=self.actor.account_id,
                resource_type="application",
                resource_id=application.id,
                metadata={"project_id": application.project_id},
            )

            return Return.ok(ApplicationDTO.from_entity(application))

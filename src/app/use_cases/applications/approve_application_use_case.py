"""
Approve Application Use Case

The project owner accepts one pending application. In a single transaction
the application becomes ACCEPTED and the project becomes ASSIGNED to the
applicant. Both writes are conditional on the status that was checked, so
of two concurrent approvals for the same project only one can commit.
"""
import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.repositories import AcceptedApplicationConflict
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require, require_owner
from src.domain import Actor, ApplicationStatus
from src.domain.lifecycle import Transition, apply_transition, decide_approve, invalid_transition
from src.app.use_cases.projects.dtos import ProjectDTO
from .dtos import ApplicationDTO, ApproveApplicationResponseDTO
from .status_change import status_changed_concurrently

logger = logging.getLogger(__name__)


def project_assigned_concurrently(transition: Transition):
    return invalid_transition(
        "Project was assigned or changed by another request",
        transition.source,
        transition.target,
    )


class ApproveApplicationUseCase:
    """
    Use case: Approve Application

    Competing pending applications are left PENDING (they can no longer be
    approved because the project is not OPEN) unless auto_reject_competing
    is set, in which case they are rejected in the same transaction.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        actor: Optional[Actor],
        audit_service: AuditService,
        auto_reject_competing: bool = False,
    ):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service
        self.auto_reject_competing = auto_reject_competing

    async def execute(self, application_id: str) -> Result[ApproveApplicationResponseDTO]:
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

            decision = decide_approve(project, application)
            if decision.is_err():
                return Return.err(decision.error)
            transition = decision.value

            # Project first: a lost race stops here, before the application row is touched
            now = datetime.utcnow()
            changes = apply_transition(
                project, transition, now, assigned_student_id=application.applicant_id
            )
            assigned = await self.uow.projects.compare_and_set_status(
                project.id, transition.source, changes
            )
            if not assigned:
                await self.uow.rollback()
                return Return.err(project_assigned_concurrently(transition))

            application.accept(now)
            try:
                accepted = await self.uow.applications.compare_and_set_status(
                    application.id,
                    ApplicationStatus.PENDING,
                    {
                        "status": application.status,
                        "status_changed_at": application.status_changed_at,
                        "seen_by_applicant": application.seen_by_applicant,
                    },
                )
            except AcceptedApplicationConflict as e:
                logger.warning(f"Approval of {application.id} hit the accepted index: {e}")
                await self.uow.rollback()
                return Return.err(project_assigned_concurrently(transition))
            if not accepted:
                await self.uow.rollback()
                return Return.err(status_changed_concurrently())

            rejected_competitors = 0
            if self.auto_reject_competing:
                rejected_competitors = await self.uow.applications.reject_pending(
                    project.id, exclude_id=application.id, now=now
                )

            await self.uow.commit()

            await record_event(
                self.audit_service,
                event_type="application_approved",
                actor_id=self.actor.account_id,
                resource_type="application",
                resource_id=application.id,
                metadata={
                    "project_id": project.id,
                    "assigned_student_id": application.applicant_id,
                    "rejected_competitors": rejected_competitors,
                },
            )

            return Return.ok(
                ApproveApplicationResponseDTO(
                    application=ApplicationDTO.from_entity(application),
                    project=ProjectDTO.from_entity(project),
                    rejected_competitors=rejected_competitors,
                )
            )

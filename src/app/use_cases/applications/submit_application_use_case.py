"""
Submit Application Use Case

A student applies to an OPEN project with a cover letter. Requires a
complete profile and no other active application to the same project.
"""
import logging
from typing import Optional
from libs.result import Result, Error, Return
from src.app.repositories import DuplicateApplicationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require
from src.app.services.profile_completeness import ProfileCompletenessChecker
from src.domain import Actor, Application, ProjectStatus
from src.domain.enums import value_of
from .dtos import SubmitApplicationRequest, ApplicationDTO

logger = logging.getLogger(__name__)


def duplicate_application() -> Error:
    return Error(
        code="DUPLICATE_APPLICATION",
        message="You have already applied to this project",
    )


class SubmitApplicationUseCase:

    def __init__(
        self,
        uow: UnitOfWork,
        actor: Optional[Actor],
        audit_service: AuditService,
        profile_checker: ProfileCompletenessChecker,
    ):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service
        self.profile_checker = profile_checker

    async def execute(
        self, project_id: str, request: SubmitApplicationRequest
    ) -> Result[ApplicationDTO]:
        """
        Submit an application

        Args:
            project_id: The project to apply to
            request: Cover letter

        Returns:
            Result[ApplicationDTO]: The created PENDING application
        """
        error = require(self.actor, Capability.SUBMIT_APPLICATION)
        if error:
            return Return.err(error)

        completeness = await self.profile_checker.check(self.actor.account_id)
        if not completeness.ok:
            return Return.err(
                Error(
                    code="PROFILE_INCOMPLETE",
                    message="Complete your profile before applying: missing "
                    + ", ".join(completeness.missing),
                    details={"missing_fields": list(completeness.missing)},
                )
            )

        cover_letter = (request.cover_letter or "").strip()
        if not cover_letter:
            return Return.err(
                Error(
                    code="INVALID_INPUT",
                    message="Cover letter is required",
                    details={"field": "cover_letter"},
                )
            )

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error(code="NOT_FOUND", message="Project not found"))

            if project.status != ProjectStatus.OPEN:
                return Return.err(
                    Error(
                        code="PROJECT_UNAVAILABLE",
                        message="This project is not accepting applications",
                        details={"current_status": value_of(project.status)},
                    )
                )

            existing = await self.uow.applications.get_active(project.id, self.actor.account_id)
            if existing is not None:
                return Return.err(duplicate_application())

            application = Application(
                project_id=project.id,
                applicant_id=self.actor.account_id,
                cover_letter=cover_letter,
            )
            try:
                created = await self.uow.applications.create(application)
                await self.uow.commit()
            except DuplicateApplicationError:
                # A concurrent request created the same pair first
                logger.warning(
                    f"Duplicate application rejected by index for project {project.id}"
                )
                await self.uow.rollback()
                return Return.err(duplicate_application())

            await record_event(
                self.audit_service,
                event_type="application_submitted",
                actor_id=self.actor.account_id,
                resource_type="application",
                resource_id=created.id,
                metadata={"project_id": project.id},
            )

            return Return.ok(ApplicationDTO.from_entity(created))

from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, access_denied, require, require_owner
from src.domain import Actor
from src.domain.lifecycle import check_editable
from .dtos import UpdateProjectRequest, ProjectDTO
from .validation import validate_project_fields, clean_skills, to_naive_utc

EDITABLE_FIELDS = (
    "title",
    "description",
    "required_skills",
    "category",
    "scope",
    "budget",
    "start_date",
    "estimated_end_date",
    "application_deadline",
)


class EditProjectUseCase:
    """
    Use case for editing the terms of a project.

    Only the owner may edit, and only while the project is DRAFT or OPEN.
    Status is never changed here.
    """

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor], audit_service: AuditService):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service

    async def execute(self, project_id: str, request: UpdateProjectRequest) -> Result[ProjectDTO]:
        error = require(self.actor, Capability.MANAGE_PROJECT)
        if error:
            return Return.err(error)

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)

            error = require_owner(self.actor, project)
            if error:
                return Return.err(error)

            error = check_editable(project)
            if error:
                return Return.err(error)

            supplied = request.model_dump(exclude_unset=True, exclude_none=True)
            merged = {field: getattr(project, field) for field in EDITABLE_FIELDS}
            merged.update(supplied)
            for field in ("start_date", "estimated_end_date", "application_deadline"):
                merged[field] = to_naive_utc(merged[field])

            # Validate the resulting project as a whole, not just the supplied fields
            error = validate_project_fields(
                title=merged["title"],
                description=merged["description"],
                required_skills=merged["required_skills"],
                budget=merged["budget"],
                start_date=merged["start_date"],
                estimated_end_date=merged["estimated_end_date"],
                application_deadline=merged["application_deadline"],
            )
            if error:
                return Return.err(error)

            merged["title"] = merged["title"].strip()
            merged["description"] = merged["description"].strip()
            merged["required_skills"] = clean_skills(merged["required_skills"])

            changes = {field: merged[field] for field in supplied}
            changes["updated_at"] = datetime.utcnow()

            # Conditional on the status we checked, so a concurrent approval wins
            updated = await self.uow.projects.compare_and_set_status(
                project.id, project.status, changes
            )
            if not updated:
                await self.uow.rollback()
                return Return.err(
                    access_denied("Project status changed while editing, it can no longer be edited")
                )
            for field, value in changes.items():
                setattr(project, field, value)
            await self.uow.commit()
            updated_project = project

            await record_event(
                self.audit_service,
                event_type="project_updated",
                actor_id=self.actor.account_id,
                resource_type="project",
                resource_id=updated_project.id,
                metadata={"updated_fields": sorted(supplied.keys())},
            )

            return Return.ok(ProjectDTO.from_entity(updated_project))

from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require
from src.domain import Actor, Project, ProjectStatus
from .dtos import CreateProjectRequest, ProjectDTO
from .validation import validate_project_fields, clean_skills, to_naive_utc


class CreateProjectUseCase:
    """Use case for posting a new project as a draft or directly open"""

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor], audit_service: AuditService):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service

    async def execute(self, request: CreateProjectRequest) -> Result[ProjectDTO]:
        """
        Execute the create project use case

        Returns:
            Result[ProjectDTO]: Success with project data or error
        """
        error = require(self.actor, Capability.CREATE_PROJECT)
        if error:
            return Return.err(error)

        start_date = to_naive_utc(request.start_date)
        estimated_end_date = to_naive_utc(request.estimated_end_date)
        application_deadline = to_naive_utc(request.application_deadline)

        error = validate_project_fields(
            title=request.title,
            description=request.description,
            required_skills=request.required_skills,
            budget=request.budget,
            start_date=start_date,
            estimated_end_date=estimated_end_date,
            application_deadline=application_deadline,
        )
        if error:
            return Return.err(error)

        status = ProjectStatus.DRAFT if request.as_draft else ProjectStatus.OPEN

        async with self.uow:
            project = Project(
                business_owner_id=self.actor.account_id,
                title=request.title.strip(),
                description=request.description.strip(),
                required_skills=clean_skills(request.required_skills),
                category=request.category,
                scope=request.scope,
                budget=request.budget,
                start_date=start_date,
                estimated_end_date=estimated_end_date,
                application_deadline=application_deadline,
                status=status,
                is_public=status == ProjectStatus.OPEN,
            )

            created_project = await self.uow.projects.create(project)
            await self.uow.commit()

            await record_event(
                self.audit_service,
                event_type="project_created",
                actor_id=self.actor.account_id,
                resource_type="project",
                resource_id=created_project.id,
                metadata={"title": created_project.title, "status": status.value},
            )

            return Return.ok(ProjectDTO.from_entity(created_project))

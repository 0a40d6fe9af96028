from typing import List, Optional
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain import Actor, Project, ProjectStatus
from src.domain.enums import value_of
from .dtos import ProjectTimelineResponse, TimelineEntryDTO
from .get_project_by_id_use_case import is_visible_to

# Milestones after assignment, in lifecycle order
MILESTONES = [
    (
        ProjectStatus.ASSIGNED,
        "assigned_at",
        "Assigned",
        "Project has been assigned to the selected student after review of all applications.",
    ),
    (
        ProjectStatus.IN_PROGRESS,
        "in_progress_at",
        "In Progress",
        "Student has officially begun working on the project.",
    ),
    (
        ProjectStatus.IN_REVIEW,
        "in_review_at",
        "In Review",
        "The student has submitted their completed work for review.",
    ),
    (
        ProjectStatus.COMPLETED,
        "completed_at",
        "Completed",
        "Project has been successfully completed and approved by the business owner.",
    ),
]

_REACHED_ORDER = [milestone[0] for milestone in MILESTONES]


class GetProjectTimelineUseCase:
    """
    Use case for the milestone timeline of a project.

    Owners and applicants see the milestones reached so far; everyone else
    only sees when the project was created.
    """

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor] = None):
        self.uow = uow
        self.actor = actor

    async def execute(self, project_id: str) -> Result[ProjectTimelineResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None or not is_visible_to(project, self.actor):
                return Return.err(Error(code="NOT_FOUND", message="Project not found"))

            application = None
            if self.actor is not None:
                application = await self.uow.applications.get_active(
                    project.id, self.actor.account_id
                )
            is_owner = self.actor is not None and project.is_owned_by(self.actor.account_id)

            created = TimelineEntryDTO(
                title="Project Created",
                content="Project was created and is open for applications.",
                date=project.created_at,
            )
            if not is_owner and application is None:
                entries = [created]
            else:
                first = created
                if application is not None:
                    first = TimelineEntryDTO(
                        title="Application Submitted",
                        content="User submitted their application for this project.",
                        date=application.applied_at,
                    )
                entries = [first] + self._milestones(project)

            return Return.ok(
                ProjectTimelineResponse(project_id=project.id, status=project.status, entries=entries)
            )

    @staticmethod
    def _milestones(project: Project) -> List[TimelineEntryDTO]:
        status = ProjectStatus(value_of(project.status))
        if status not in _REACHED_ORDER:
            return []
        reached = _REACHED_ORDER.index(status)
        return [
            TimelineEntryDTO(title=title, content=content, date=getattr(project, field))
            for index, (_, field, title, content) in enumerate(MILESTONES)
            if index <= reached
        ]

from datetime import datetime
from typing import List
from pydantic import BaseModel
from src.domain import Application
from src.domain.enums import ApplicationStatus
from src.app.use_cases.projects.dtos import ProjectDTO


class SubmitApplicationRequest(BaseModel):
    """Request DTO for applying to a project"""

    cover_letter: str


class ApplicationDTO(BaseModel):
    """Response DTO for a single application"""

    id: str
    project_id: str
    applicant_id: str
    status: ApplicationStatus
    cover_letter: str
    seen_by_applicant: bool
    applied_at: datetime
    status_changed_at: datetime

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationDTO":
        return cls(
            id=str(application.id),
            project_id=str(application.project_id),
            applicant_id=str(application.applicant_id),
            status=application.status,
            cover_letter=application.cover_letter,
            seen_by_applicant=application.seen_by_applicant,
            applied_at=application.applied_at,
            status_changed_at=application.status_changed_at,
        )


class ApproveApplicationResponseDTO(BaseModel):
    """Response DTO for approving an application: both sides of the assignment"""

    application: ApplicationDTO
    project: ProjectDTO
    rejected_competitors: int = 0


class ListApplicationsResponseDTO(BaseModel):
    applications: List[ApplicationDTO]

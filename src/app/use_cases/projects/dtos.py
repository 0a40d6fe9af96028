from typing import List, Optional
from pydantic import BaseModel
from datetime import datetime
from src.domain import Project
from src.domain.enums import ProjectStatus, ProjectScope, ProjectCategory


class CreateProjectRequest(BaseModel):
    """Request DTO for creating a project"""

    title: str
    description: str
    required_skills: List[str]
    category: ProjectCategory
    scope: ProjectScope
    budget: float = 0
    start_date: datetime
    estimated_end_date: datetime
    application_deadline: datetime
    as_draft: bool = False


class UpdateProjectRequest(BaseModel):
    """Request DTO for editing a draft or open project; omitted fields are kept"""

    title: Optional[str] = None
    description: Optional[str] = None
    required_skills: Optional[List[str]] = None
    category: Optional[ProjectCategory] = None
    scope: Optional[ProjectScope] = None
    budget: Optional[float] = None
    start_date: Optional[datetime] = None
    estimated_end_date: Optional[datetime] = None
    application_deadline: Optional[datetime] = None


class AdvanceProjectStatusRequest(BaseModel):
    """Request DTO for moving a project along the work path"""

    status: ProjectStatus


class ProjectDTO(BaseModel):
    """Project DTO for listing and single project retrieval"""

    id: str
    business_owner_id: str
    assigned_student_id: Optional[str] = None
    title: str
    description: str
    required_skills: List[str]
    category: ProjectCategory
    scope: ProjectScope
    budget: float
    start_date: datetime
    estimated_end_date: datetime
    application_deadline: datetime
    is_public: bool
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime
    assigned_at: Optional[datetime] = None
    in_progress_at: Optional[datetime] = None
    in_review_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectDTO":
        return cls(
            id=str(project.id),
            business_owner_id=str(project.business_owner_id),
            assigned_student_id=project.assigned_student_id,
            title=project.title,
            description=project.description,
            required_skills=list(project.required_skills or []),
            category=project.category,
            scope=project.scope,
            budget=project.budget,
            start_date=project.start_date,
            estimated_end_date=project.estimated_end_date,
            application_deadline=project.application_deadline,
            is_public=project.is_public,
            status=project.status,
            created_at=project.created_at,
            updated_at=project.updated_at,
            assigned_at=project.assigned_at,
            in_progress_at=project.in_progress_at,
            in_review_at=project.in_review_at,
            completed_at=project.completed_at,
        )


class GetProjectsResponse(BaseModel):
    """Response DTO for project listings"""

    projects: List[ProjectDTO]
    total: int
    page: int = 1
    page_size: int


class DeleteProjectResponse(BaseModel):
    id: str
    deleted: bool = True


class TimelineEntryDTO(BaseModel):
    """One milestone; date is None while the step is still pending"""

    title: str
    content: str
    date: Optional[datetime] = None


class ProjectTimelineResponse(BaseModel):
    project_id: str
    status: ProjectStatus
    entries: List[TimelineEntryDTO]

from src.app.use_cases.projects.create_project_use_case import CreateProjectUseCase
from src.app.use_cases.projects.edit_project_use_case import EditProjectUseCase
from src.app.use_cases.projects.publish_draft_use_case import PublishDraftUseCase
from src.app.use_cases.projects.archive_project_use_case import (
    ArchiveProjectUseCase,
    UnarchiveProjectUseCase,
)
from src.app.use_cases.projects.cancel_project_use_case import CancelProjectUseCase
from src.app.use_cases.projects.delete_project_use_case import DeleteProjectUseCase
from src.app.use_cases.projects.advance_project_status_use_case import AdvanceProjectStatusUseCase
from src.app.use_cases.projects.get_project_by_id_use_case import GetProjectByIdUseCase
from src.app.use_cases.projects.get_projects_use_case import (
    GetOpenProjectsUseCase,
    GetOwnerProjectsUseCase,
    GetCompletedProjectsUseCase,
)
from src.app.use_cases.projects.get_project_timeline_use_case import GetProjectTimelineUseCase
from src.app.use_cases.projects.dtos import (
    CreateProjectRequest,
    UpdateProjectRequest,
    AdvanceProjectStatusRequest,
    ProjectDTO,
    GetProjectsResponse,
    DeleteProjectResponse,
    TimelineEntryDTO,
    ProjectTimelineResponse,
)

__all__ = [
    "CreateProjectUseCase",
    "EditProjectUseCase",
    "PublishDraftUseCase",
    "ArchiveProjectUseCase",
    "UnarchiveProjectUseCase",
    "CancelProjectUseCase",
    "DeleteProjectUseCase",
    "AdvanceProjectStatusUseCase",
    "GetProjectByIdUseCase",
    "GetOpenProjectsUseCase",
    "GetOwnerProjectsUseCase",
    "GetCompletedProjectsUseCase",
    "GetProjectTimelineUseCase",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "AdvanceProjectStatusRequest",
    "ProjectDTO",
    "GetProjectsResponse",
    "DeleteProjectResponse",
    "TimelineEntryDTO",
    "ProjectTimelineResponse",
]

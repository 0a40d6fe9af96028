from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from config import ApplicationConfig
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.event_publisher import EventPublisher
from src.app.services.profile_completeness import ProfileCompletenessChecker
from src.depends import (
    get_unit_of_work,
    get_audit_service,
    get_current_actor,
    get_event_publisher,
    get_profile_checker,
)
from src.domain import Actor, ProjectCategory, ProjectScope
from src.app.use_cases.projects import (
    CreateProjectUseCase,
    CreateProjectRequest,
    EditProjectUseCase,
    UpdateProjectRequest,
    PublishDraftUseCase,
    ArchiveProjectUseCase,
    UnarchiveProjectUseCase,
    CancelProjectUseCase,
    DeleteProjectUseCase,
    DeleteProjectResponse,
    AdvanceProjectStatusUseCase,
    AdvanceProjectStatusRequest,
    GetOpenProjectsUseCase,
    GetOwnerProjectsUseCase,
    GetProjectByIdUseCase,
    GetProjectTimelineUseCase,
    GetProjectsResponse,
    ProjectTimelineResponse,
    ProjectDTO,
)
from src.app.use_cases.applications import (
    SubmitApplicationUseCase,
    SubmitApplicationRequest,
    ListProjectApplicationsUseCase,
    ListApplicationsResponseDTO,
    ApplicationDTO,
)

router = APIRouter()


@router.get("/projects", response_model=GetProjectsResponse, status_code=status.HTTP_200_OK)
async def get_open_projects(
    page: int = Query(1, ge=1),
    category: Optional[ProjectCategory] = None,
    scope: Optional[ProjectScope] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Public listing of OPEN projects, newest first"""
    use_case = GetOpenProjectsUseCase(uow, page_size=ApplicationConfig.OPEN_PROJECTS_PAGE_SIZE)
    result = await use_case.execute(page=page, category=category, scope=scope)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/projects/mine", response_model=GetProjectsResponse, status_code=status.HTTP_200_OK)
async def get_my_projects(
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Projects posted by the calling business owner"""
    use_case = GetOwnerProjectsUseCase(uow, actor)
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/projects", response_model=ProjectDTO, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectRequest,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    """Create a project, published immediately unless as_draft is set"""
    use_case = CreateProjectUseCase(uow, actor, audit_service)
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/projects/{project_id}", response_model=ProjectDTO, status_code=status.HTTP_200_OK)
async def get_project_by_id(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetProjectByIdUseCase(uow, actor)
    result = await use_case.execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/projects/{project_id}", response_model=ProjectDTO, status_code=status.HTTP_200_OK)
async def edit_project(
    project_id: str,
    request: UpdateProjectRequest,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    """Edit a DRAFT or OPEN project; omitted fields are kept"""
    use_case = EditProjectUseCase(uow, actor, audit_service)
    result = await use_case.execute(project_id, request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/projects/{project_id}", response_model=DeleteProjectResponse, status_code=status.HTTP_200_OK
)
async def delete_project(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    use_case = DeleteProjectUseCase(uow, actor, audit_service)
    result = await use_case.execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/publish", response_model=ProjectDTO, status_code=status.HTTP_200_OK
)
async def publish_project(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    result = await PublishDraftUseCase(uow, actor, audit_service).execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/archive", response_model=ProjectDTO, status_code=status.HTTP_200_OK
)
async def archive_project(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    result = await ArchiveProjectUseCase(uow, actor, audit_service).execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/unarchive", response_model=ProjectDTO, status_code=status.HTTP_200_OK
)
async def unarchive_project(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    result = await UnarchiveProjectUseCase(uow, actor, audit_service).execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/cancel", response_model=ProjectDTO, status_code=status.HTTP_200_OK
)
async def cancel_project(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    result = await CancelProjectUseCase(uow, actor, audit_service).execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/status", response_model=ProjectDTO, status_code=status.HTTP_200_OK
)
async def advance_project_status(
    project_id: str,
    request: AdvanceProjectStatusRequest,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
):
    """Move an assigned project along IN_PROGRESS, IN_REVIEW, COMPLETED"""
    use_case = AdvanceProjectStatusUseCase(
        uow,
        actor,
        audit_service,
        event_publisher,
        scope_hours=ApplicationConfig.SCOPE_HOURS,
    )
    result = await use_case.execute(project_id, request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/projects/{project_id}/timeline",
    response_model=ProjectTimelineResponse,
    status_code=status.HTTP_200_OK,
)
async def get_project_timeline(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProjectTimelineUseCase(uow, actor).execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/projects/{project_id}/applications",
    response_model=ListApplicationsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_project_applications(
    project_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Applications to a project, for its owner"""
    result = await ListProjectApplicationsUseCase(uow, actor).execute(project_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/projects/{project_id}/applications",
    response_model=ApplicationDTO,
    status_code=status.HTTP_201_CREATED,
)
async def submit_application(
    project_id: str,
    request: SubmitApplicationRequest,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
    profile_checker: ProfileCompletenessChecker = Depends(get_profile_checker),
):
    """Apply to an OPEN project"""
    use_case = SubmitApplicationUseCase(uow, actor, audit_service, profile_checker)
    result = await use_case.execute(project_id, request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value

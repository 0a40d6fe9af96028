"""Publish, archive, unarchive, cancel and delete"""
import pytest
from src.app.use_cases.projects import (
    ArchiveProjectUseCase,
    CancelProjectUseCase,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    EditProjectUseCase,
    PublishDraftUseCase,
    UnarchiveProjectUseCase,
    UpdateProjectRequest,
)
from src.domain import ProjectStatus
from tests.fixtures.factories import make_create_request, make_project


@pytest.mark.asyncio
async def test_draft_edit_publish_flow(mock_uow, audit_service, owner):
    """Create a draft, edit its budget, publish it"""
    created = await CreateProjectUseCase(mock_uow, owner, audit_service).execute(
        make_create_request(as_draft=True, budget=100)
    )
    project = mock_uow.projects.create.call_args[0][0]
    mock_uow.projects.get_by_id.return_value = project
    assert created.value.status == ProjectStatus.DRAFT

    edited = await EditProjectUseCase(mock_uow, owner, audit_service).execute(
        project.id, UpdateProjectRequest(budget=250)
    )
    assert edited.value.budget == 250

    published = await PublishDraftUseCase(mock_uow, owner, audit_service).execute(project.id)

    assert published.is_ok()
    assert published.value.status == ProjectStatus.OPEN
    assert published.value.is_public is True
    assert published.value.budget == 250
    assert audit_service.log_event.call_args[1]["event_type"] == "project_published"


@pytest.mark.asyncio
async def test_publish_open_project_is_invalid(mock_uow, audit_service, owner):
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)

    result = await PublishDraftUseCase(mock_uow, owner, audit_service).execute("project-1")

    assert result.error.code == "INVALID_TRANSITION"
    mock_uow.projects.compare_and_set_status.assert_not_called()


@pytest.mark.asyncio
async def test_archive_and_unarchive(mock_uow, audit_service, owner):
    project = make_project(ProjectStatus.OPEN)
    mock_uow.projects.get_by_id.return_value = project

    archived = await ArchiveProjectUseCase(mock_uow, owner, audit_service).execute(project.id)
    assert archived.value.status == ProjectStatus.ARCHIVED
    assert mock_uow.projects.compare_and_set_status.call_args[0][1] == ProjectStatus.OPEN

    restored = await UnarchiveProjectUseCase(mock_uow, owner, audit_service).execute(project.id)
    assert restored.value.status == ProjectStatus.OPEN
    assert mock_uow.projects.compare_and_set_status.call_args[0][1] == ProjectStatus.ARCHIVED

    events = [c[1]["event_type"] for c in audit_service.log_event.call_args_list]
    assert events == ["project_archived", "project_unarchived"]


@pytest.mark.asyncio
async def test_cancel_open_project(mock_uow, audit_service, owner):
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)

    result = await CancelProjectUseCase(mock_uow, owner, audit_service).execute("project-1")

    assert result.value.status == ProjectStatus.CANCELLED


@pytest.mark.asyncio
async def test_transition_lost_race_rolls_back(mock_uow, audit_service, owner):
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.DRAFT)
    mock_uow.projects.compare_and_set_status.return_value = False

    result = await PublishDraftUseCase(mock_uow, owner, audit_service).execute("project-1")

    assert result.error.code == "INVALID_TRANSITION"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_student_cannot_archive(mock_uow, audit_service, student):
    result = await ArchiveProjectUseCase(mock_uow, student, audit_service).execute("project-1")

    assert result.error.code == "FORBIDDEN"
    mock_uow.projects.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_delete_open_project_removes_applications(mock_uow, audit_service, owner):
    project = make_project(ProjectStatus.OPEN)
    mock_uow.projects.get_by_id.return_value = project

    result = await DeleteProjectUseCase(mock_uow, owner, audit_service).execute(project.id)

    assert result.value.deleted is True
    mock_uow.applications.delete_by_project.assert_called_once_with(project.id)
    mock_uow.projects.delete.assert_called_once_with(project)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_assigned_project_is_forbidden(mock_uow, audit_service, owner):
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.ASSIGNED)

    result = await DeleteProjectUseCase(mock_uow, owner, audit_service).execute("project-1")

    assert result.error.code == "FORBIDDEN"
    mock_uow.projects.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_project_is_forbidden(mock_uow, audit_service, owner):
    result = await DeleteProjectUseCase(mock_uow, owner, audit_service).execute("missing")

    assert result.error.code == "FORBIDDEN"

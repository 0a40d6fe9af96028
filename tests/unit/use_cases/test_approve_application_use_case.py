import pytest
from src.app.repositories import AcceptedApplicationConflict
from src.app.use_cases.applications import ApproveApplicationUseCase
from src.domain import ApplicationStatus, ProjectStatus
from tests.fixtures.factories import STUDENT_ID, make_application, make_project


@pytest.mark.asyncio
async def test_approve_assigns_project(mock_uow, audit_service, owner):
    project = make_project(ProjectStatus.OPEN)
    application = make_application()
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.projects.get_by_id.return_value = project

    result = await ApproveApplicationUseCase(mock_uow, owner, audit_service).execute(
        application.id
    )

    assert result.is_ok()
    assert result.value.application.status == ApplicationStatus.ACCEPTED
    assert result.value.application.seen_by_applicant is False
    assert result.value.project.status == ProjectStatus.ASSIGNED
    assert result.value.project.assigned_student_id == STUDENT_ID
    assert result.value.project.assigned_at is not None
    assert result.value.rejected_competitors == 0

    app_call = mock_uow.applications.compare_and_set_status.call_args[0]
    assert app_call[1] == ApplicationStatus.PENDING
    project_call = mock_uow.projects.compare_and_set_status.call_args[0]
    assert project_call[1] == ProjectStatus.OPEN
    assert project_call[2]["assigned_student_id"] == STUDENT_ID
    mock_uow.applications.reject_pending.assert_not_called()
    mock_uow.commit.assert_called_once()
    assert audit_service.log_event.call_args[1]["event_type"] == "application_approved"


@pytest.mark.asyncio
async def test_first_approval_wins(mock_uow, audit_service, owner):
    """After one approval the project is ASSIGNED and a competing approval fails"""
    project = make_project(ProjectStatus.OPEN)
    first = make_application(id="application-1", applicant_id="student-1")
    second = make_application(id="application-2", applicant_id="student-2")
    applications = {first.id: first, second.id: second}
    mock_uow.applications.get_by_id.side_effect = lambda application_id: applications[application_id]
    mock_uow.projects.get_by_id.return_value = project
    use_case = ApproveApplicationUseCase(mock_uow, owner, audit_service)

    won = await use_case.execute(first.id)
    lost = await use_case.execute(second.id)

    assert won.is_ok()
    assert lost.error.code == "INVALID_TRANSITION"
    assert project.assigned_student_id == "student-1"
    assert second.status == ApplicationStatus.PENDING
    assert mock_uow.commit.call_count == 1


@pytest.mark.asyncio
async def test_concurrent_approval_loses_cas(mock_uow, audit_service, owner):
    """Both requests read OPEN; the project update of the loser matches no row"""
    mock_uow.applications.get_by_id.return_value = make_application()
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)
    mock_uow.projects.compare_and_set_status.return_value = False

    result = await ApproveApplicationUseCase(mock_uow, owner, audit_service).execute(
        "application-1"
    )

    assert result.error.code == "INVALID_TRANSITION"
    mock_uow.applications.compare_and_set_status.assert_not_called()
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()
    audit_service.log_event.assert_not_called()


@pytest.mark.asyncio
async def test_application_already_decided(mock_uow, audit_service, owner):
    mock_uow.applications.get_by_id.return_value = make_application()
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)
    mock_uow.applications.compare_and_set_status.return_value = False

    result = await ApproveApplicationUseCase(mock_uow, owner, audit_service).execute(
        "application-1"
    )

    assert result.error.code == "INVALID_TRANSITION"
    assert result.error.message == "Application status was changed by another request"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_project_update_runs_before_application_update(mock_uow, audit_service, owner):
    mock_uow.applications.get_by_id.return_value = make_application()
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)
    mock_uow.projects.compare_and_set_status.return_value = False

    await ApproveApplicationUseCase(mock_uow, owner, audit_service).execute("application-1")

    mock_uow.applications.compare_and_set_status.assert_not_called()


@pytest.mark.asyncio
async def test_accepted_index_conflict_is_invalid_transition(mock_uow, audit_service, owner):
    """Another approval committed an ACCEPTED row for the project after our read"""
    mock_uow.applications.get_by_id.return_value = make_application()
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)
    mock_uow.applications.compare_and_set_status.side_effect = AcceptedApplicationConflict(
        "duplicate key value violates unique constraint \"uq_applications_accepted_project\""
    )

    result = await ApproveApplicationUseCase(mock_uow, owner, audit_service).execute(
        "application-1"
    )

    assert result.error.code == "INVALID_TRANSITION"
    assert result.error.message == "Project was assigned or changed by another request"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()
    audit_service.log_event.assert_not_called()


@pytest.mark.asyncio
async def test_auto_reject_competing_applications(mock_uow, audit_service, owner):
    mock_uow.applications.get_by_id.return_value = make_application()
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)
    mock_uow.applications.reject_pending.return_value = 2

    result = await ApproveApplicationUseCase(
        mock_uow, owner, audit_service, auto_reject_competing=True
    ).execute("application-1")

    assert result.value.rejected_competitors == 2
    call_kwargs = mock_uow.applications.reject_pending.call_args[1]
    assert call_kwargs["exclude_id"] == "application-1"


@pytest.mark.asyncio
async def test_only_project_owner_can_approve(mock_uow, audit_service):
    from src.domain import Actor, UserRole

    mock_uow.applications.get_by_id.return_value = make_application()
    mock_uow.projects.get_by_id.return_value = make_project(ProjectStatus.OPEN)
    other_owner = Actor(account_id="owner-2", role=UserRole.BUSINESS_OWNER)

    result = await ApproveApplicationUseCase(mock_uow, other_owner, audit_service).execute(
        "application-1"
    )

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_missing_application_is_forbidden(mock_uow, audit_service, owner):
    result = await ApproveApplicationUseCase(mock_uow, owner, audit_service).execute("missing")

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_student_cannot_approve(mock_uow, audit_service, student):
    result = await ApproveApplicationUseCase(mock_uow, student, audit_service).execute(
        "application-1"
    )

    assert result.error.code == "FORBIDDEN"
    mock_uow.applications.get_by_id.assert_not_called()

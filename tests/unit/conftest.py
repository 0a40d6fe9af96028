from unittest.mock import AsyncMock, MagicMock
import pytest
from src.domain import Actor, UserRole
from tests.fixtures.factories import OWNER_ID, STUDENT_ID


@pytest.fixture
def mock_uow():
    """Unit of work whose repositories are AsyncMock-backed"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.projects = MagicMock()
    uow.projects.create = AsyncMock(side_effect=lambda project: project)
    uow.projects.get_by_id = AsyncMock(return_value=None)
    uow.projects.list_open = AsyncMock(return_value=([], 0))
    uow.projects.list_by_owner = AsyncMock(return_value=[])
    uow.projects.list_completed_by_student = AsyncMock(return_value=[])
    uow.projects.compare_and_set_status = AsyncMock(return_value=True)
    uow.projects.delete = AsyncMock()

    uow.applications = MagicMock()
    uow.applications.create = AsyncMock(side_effect=lambda application: application)
    uow.applications.get_by_id = AsyncMock(return_value=None)
    uow.applications.get_active = AsyncMock(return_value=None)
    uow.applications.list_by_project = AsyncMock(return_value=[])
    uow.applications.list_by_applicant = AsyncMock(return_value=[])
    uow.applications.update = AsyncMock(side_effect=lambda application: application)
    uow.applications.compare_and_set_status = AsyncMock(return_value=True)
    uow.applications.reject_pending = AsyncMock(return_value=0)
    uow.applications.delete_by_project = AsyncMock()

    uow.dead_letter_events = MagicMock()
    uow.dead_letter_events.create = AsyncMock(side_effect=lambda event: event)
    uow.dead_letter_events.get_by_id = AsyncMock(return_value=None)
    uow.dead_letter_events.list_unresolved = AsyncMock(return_value=[])
    uow.dead_letter_events.update = AsyncMock(side_effect=lambda event: event)
    return uow


@pytest.fixture
def audit_service():
    service = MagicMock()
    service.log_event = AsyncMock()
    return service


@pytest.fixture
def owner():
    return Actor(account_id=OWNER_ID, role=UserRole.BUSINESS_OWNER)


@pytest.fixture
def student():
    return Actor(account_id=STUDENT_ID, role=UserRole.USER)


@pytest.fixture
def stranger():
    return Actor(account_id="student-2", role=UserRole.USER)

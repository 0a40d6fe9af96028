from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional
from src.domain import Application, ApplicationStatus


class IApplicationRepository(ABC):
    """Interface for Application repository"""

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """
        Create a new application.

        Raises:
            DuplicateApplicationError: an active application already exists for the pair
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: str) -> Optional[Application]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def get_active(self, project_id: str, applicant_id: str) -> Optional[Application]:
        """Get the non-withdrawn application of an applicant for a project"""
        pass

    @abstractmethod
    async def list_by_project(self, project_id: str) -> List[Application]:
        """Get all applications for a project, oldest first"""
        pass

    @abstractmethod
    async def list_by_applicant(self, applicant_id: str) -> List[Application]:
        """Get all applications submitted by an account"""
        pass

    @abstractmethod
    async def update(self, application: Application) -> Application:
        """Update an existing application"""
        pass

    @abstractmethod
    async def compare_and_set_status(
        self, application_id: str, expected_status: ApplicationStatus, changes: Dict[str, Any]
    ) -> bool:
        """
        Write changes only if the stored status still equals expected_status.

        Raises:
            AcceptedApplicationConflict: another application of the project is
                already ACCEPTED
        """
        pass

    @abstractmethod
    async def reject_pending(self, project_id: str, exclude_id: str, now: datetime) -> int:
        """Reject every other pending application of a project, returns the count"""
        pass

    @abstractmethod
    async def delete_by_project(self, project_id: str) -> None:
        """Delete every application of a project"""
        pass


class DuplicateApplicationError(Exception):
    """Raised when the active-pair unique index rejects an insert"""
    pass


class AcceptedApplicationConflict(Exception):
    """Raised when the one-accepted-per-project unique index rejects an update"""
    pass

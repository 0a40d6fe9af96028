from src.app.repositories.project_repository import ProjectRepository
from src.app.repositories.application_repository import (
    IApplicationRepository,
    DuplicateApplicationError,
    AcceptedApplicationConflict,
)
from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.dead_letter_event_repository import IDeadLetterEventRepository

__all__ = [
    "ProjectRepository",
    "IApplicationRepository",
    "DuplicateApplicationError",
    "AcceptedApplicationConflict",
    "IAccountRepository",
    "IDeadLetterEventRepository",
]

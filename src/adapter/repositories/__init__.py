from src.adapter.repositories.project_repository import SqlAlchemyProjectRepository
from src.adapter.repositories.application_repository import SqlAlchemyApplicationRepository
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.adapter.repositories.dead_letter_event_repository import DeadLetterEventRepository

__all__ = [
    "SqlAlchemyProjectRepository",
    "SqlAlchemyApplicationRepository",
    "SqlAlchemyAccountRepository",
    "DeadLetterEventRepository",
]

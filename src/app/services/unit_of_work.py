from abc import ABC, abstractmethod
from src.app.repositories import (
    ProjectRepository,
    IApplicationRepository,
    IAccountRepository,
    IDeadLetterEventRepository,
)


class UnitOfWork(ABC):
    """
    Transaction boundary shared by the repositories of one operation.

    Leaving the context without commit() rolls back.
    """

    projects: ProjectRepository
    applications: IApplicationRepository
    accounts: IAccountRepository
    dead_letter_events: IDeadLetterEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.adapter.repositories.project_repository import SqlAlchemyProjectRepository
from src.adapter.repositories.application_repository import SqlAlchemyApplicationRepository
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.adapter.repositories.dead_letter_event_repository import DeadLetterEventRepository


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.projects = SqlAlchemyProjectRepository(self.session)
        self.applications = SqlAlchemyApplicationRepository(self.session)
        self.accounts = SqlAlchemyAccountRepository(self.session)
        self.dead_letter_events = DeadLetterEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

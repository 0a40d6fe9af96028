from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from sqlalchemy import func
from src.app.repositories import IAccountRepository
from src.domain import Account, Education


class SqlAlchemyAccountRepository(IAccountRepository):
    """SQLAlchemy implementation of Account repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        statement = select(Account).where(Account.id == account_id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_external_id(self, external_id: str) -> Optional[Account]:
        statement = select(Account).where(Account.external_id == external_id)
        result = await self.session.exec(statement)
        return result.first()

    async def count_educations(self, account_id: str) -> int:
        statement = select(func.count()).select_from(Education).where(
            Education.account_id == account_id
        )
        result = await self.session.exec(statement)
        return result.one()

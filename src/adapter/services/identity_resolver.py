from typing import Callable, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.identity_resolver import IdentityResolver
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.domain import Actor, UserRole
from src.domain.enums import value_of


class SqlAlchemyIdentityResolver(IdentityResolver):
    """Looks the caller up in the accounts table by identity provider id"""

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def resolve_actor(self, external_id: str) -> Optional[Actor]:
        if not external_id:
            return None
        async with self.session_factory() as session:
            account = await SqlAlchemyAccountRepository(session).get_by_external_id(external_id)
        if account is None:
            return None
        return Actor(account_id=account.id, role=UserRole(value_of(account.role)))

from abc import ABC, abstractmethod
from typing import Optional
from src.domain import Account


class IAccountRepository(ABC):
    """Interface for Account repository (read side only)"""

    @abstractmethod
    async def get_by_id(self, account_id: str) -> Optional[Account]:
        pass

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> Optional[Account]:
        """Get account by identity provider user id"""
        pass

    @abstractmethod
    async def count_educations(self, account_id: str) -> int:
        pass

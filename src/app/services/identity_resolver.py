from abc import ABC, abstractmethod
from typing import Optional
from src.domain import Actor


class IdentityResolver(ABC):
    """Maps an authenticated external user id to an internal account and role"""

    @abstractmethod
    async def resolve_actor(self, external_id: str) -> Optional[Actor]:
        """
        Resolve the caller.

        Returns:
            Optional[Actor]: None when no account is linked to external_id
        """
        pass

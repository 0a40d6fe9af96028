"""Dead Letter Event Repository Interface"""
from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.dead_letter_event import DeadLetterEvent


class IDeadLetterEventRepository(ABC):
    """Interface for undelivered completion events"""

    @abstractmethod
    async def create(self, dead_letter_event: DeadLetterEvent) -> DeadLetterEvent:
        pass

    @abstractmethod
    async def get_by_id(self, dead_letter_id: str) -> Optional[DeadLetterEvent]:
        pass

    @abstractmethod
    async def list_unresolved(self, limit: Optional[int] = None) -> List[DeadLetterEvent]:
        """
        Unresolved events, oldest first.

        Args:
            limit: Maximum number of rows, all of them when None
        """
        pass

    @abstractmethod
    async def update(self, dead_letter_event: DeadLetterEvent) -> DeadLetterEvent:
        """Persist the replay outcome of an event"""
        pass

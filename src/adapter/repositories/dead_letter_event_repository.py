from typing import List, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories.dead_letter_event_repository import IDeadLetterEventRepository
from src.domain.dead_letter_event import DeadLetterEvent


class DeadLetterEventRepository(IDeadLetterEventRepository):
    """SQLAlchemy implementation of the dead letter store"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, dead_letter_event: DeadLetterEvent) -> DeadLetterEvent:
        self.session.add(dead_letter_event)
        await self.session.flush()
        await self.session.refresh(dead_letter_event)
        return dead_letter_event

    async def get_by_id(self, dead_letter_id: str) -> Optional[DeadLetterEvent]:
        statement = select(DeadLetterEvent).where(DeadLetterEvent.id == dead_letter_id)
        result = await self.session.exec(statement)
        return result.first()

    async def list_unresolved(self, limit: Optional[int] = None) -> List[DeadLetterEvent]:
        statement = (
            select(DeadLetterEvent)
            .where(DeadLetterEvent.resolved == False)
            .order_by(DeadLetterEvent.created_at.asc())
        )
        if limit is not None:
            statement = statement.limit(limit)
        result = await self.session.exec(statement)
        return list(result.all())

    async def update(self, dead_letter_event: DeadLetterEvent) -> DeadLetterEvent:
        self.session.add(dead_letter_event)
        await self.session.flush()
        return dead_letter_event

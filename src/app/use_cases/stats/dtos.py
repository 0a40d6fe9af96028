from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel
from src.domain.dead_letter_event import DeadLetterEvent


class DeadLetterEventDTO(BaseModel):
    id: str
    event_type: str
    event_id: str
    account_id: Optional[str] = None
    failure_reason: str
    replay_attempts: int
    created_at: datetime
    resolved: bool
    resolved_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, dead_letter: DeadLetterEvent) -> "DeadLetterEventDTO":
        return cls(
            id=dead_letter.id,
            event_type=dead_letter.event_type,
            event_id=dead_letter.event_id,
            account_id=dead_letter.account_id,
            failure_reason=dead_letter.failure_reason,
            replay_attempts=dead_letter.replay_attempts,
            created_at=dead_letter.created_at,
            resolved=dead_letter.resolved,
            resolved_at=dead_letter.resolved_at,
        )


class ListDeadLetterEventsResponse(BaseModel):
    events: List[DeadLetterEventDTO]


class ReplayDeadLetterEventsResponse(BaseModel):
    """Outcome of one replay run; events are the rows that were attempted"""

    resolved: int
    failed: int
    events: List[DeadLetterEventDTO]

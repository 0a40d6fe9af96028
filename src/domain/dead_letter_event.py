"""Dead Letter Event Entity

Completion notifications the stats/badge service did not accept. The
status transition behind the event is never affected; an operator replays
these rows once the service is healthy again.
"""
from datetime import datetime
from typing import Optional, Dict, Any
from sqlmodel import Field, Column
from sqlalchemy import JSON as SQLJSON
from src.domain.base import BaseModel, generate_uuid


class DeadLetterEvent(BaseModel, table=True):
    __tablename__ = "dead_letter_events"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    # The undelivered event, payload is its JSON dump
    event_type: str = Field(nullable=False, index=True)
    event_id: str = Field(nullable=False, index=True)
    account_id: Optional[str] = Field(default=None, index=True)
    payload: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(SQLJSON))

    # Latest failure, overwritten by failed replays
    failure_reason: str = Field(nullable=False)
    replay_attempts: int = Field(default=0, nullable=False)

    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    resolved: bool = Field(default=False, nullable=False)
    resolved_at: Optional[datetime] = Field(default=None)
    resolution_notes: Optional[str] = Field(default=None)

    def record_replay_failure(self, reason: str) -> None:
        self.replay_attempts += 1
        self.failure_reason = reason

    def mark_resolved(self, notes: Optional[str] = None) -> None:
        """Delivered on replay; resolved rows are never replayed again"""
        self.replay_attempts += 1
        self.resolved = True
        self.resolved_at = datetime.utcnow()
        if notes:
            self.resolution_notes = notes

"""Domain events emitted after a lifecycle transition has been committed."""
from datetime import datetime
from pydantic import BaseModel, Field
from src.domain.base import generate_uuid
from src.domain.enums import ProjectScope


PROJECT_COMPLETED = "project_completed"


class ProjectCompletedEvent(BaseModel):
    """A project reached COMPLETED with an assigned student"""

    event_type: str = PROJECT_COMPLETED
    event_id: str = Field(default_factory=generate_uuid)
    project_id: str
    account_id: str
    scope: ProjectScope
    hours_contributed: int
    completed_at: datetime

from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import (
    UserRole,
    ProjectStatus,
    ProjectScope,
    ProjectCategory,
    ApplicationStatus,
    ASSIGNED_STATUSES,
    EDITABLE_STATUSES,
)
from src.domain.actor import Actor
from src.domain.account import Account, Education
from src.domain.project import Project
from src.domain.application import Application
from src.domain.dead_letter_event import DeadLetterEvent
from src.domain.events import ProjectCompletedEvent

__all__ = [
    # Base
    "BaseModel",
    "generate_uuid",
    # Enums
    "UserRole",
    "ProjectStatus",
    "ProjectScope",
    "ProjectCategory",
    "ApplicationStatus",
    "ASSIGNED_STATUSES",
    "EDITABLE_STATUSES",
    # Entities
    "Actor",
    "Account",
    "Education",
    "Project",
    "Application",
    "DeadLetterEvent",
    # Events
    "ProjectCompletedEvent",
]

from enum import Enum


class UserRole(str, Enum):
    USER = "USER"
    BUSINESS_OWNER = "BUSINESS_OWNER"
    ADMIN = "ADMIN"


class ProjectStatus(str, Enum):
    """Lifecycle status of a project"""
    DRAFT = "DRAFT"
    OPEN = "OPEN"
    ASSIGNED = "ASSIGNED"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    ARCHIVED = "ARCHIVED"


class ProjectScope(str, Enum):
    """Project size category, drives hours awarded on completion"""
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


class ProjectCategory(str, Enum):
    WEB_DEVELOPMENT = "WEB_DEVELOPMENT"
    MOBILE_DEVELOPMENT = "MOBILE_DEVELOPMENT"
    UI_UX_DESIGN = "UI_UX_DESIGN"
    DATA_SCIENCE = "DATA_SCIENCE"
    MACHINE_LEARNING = "MACHINE_LEARNING"
    BLOCKCHAIN = "BLOCKCHAIN"
    GAME_DEVELOPMENT = "GAME_DEVELOPMENT"
    OTHER = "OTHER"


class ApplicationStatus(str, Enum):
    """Status of an application to a project"""
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    WITHDRAWN = "WITHDRAWN"


# Project statuses in which an assigned student must be set
ASSIGNED_STATUSES = frozenset(
    {
        ProjectStatus.ASSIGNED,
        ProjectStatus.IN_PROGRESS,
        ProjectStatus.IN_REVIEW,
        ProjectStatus.COMPLETED,
    }
)

# Statuses in which a project can still be edited, archived or deleted
EDITABLE_STATUSES = frozenset({ProjectStatus.DRAFT, ProjectStatus.OPEN})


def value_of(member) -> str:
    """Plain string value of an enum member, or the value itself if already a string"""
    return member.value if hasattr(member, "value") else member

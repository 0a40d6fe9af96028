"""Field validation for project create/edit"""
from datetime import datetime, timezone
from typing import List, Optional
from libs.result import Error

TITLE_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 1000


def _invalid(message: str, field: str) -> Error:
    return Error(code="INVALID_INPUT", message=message, details={"field": field})


def validate_project_fields(
    title: str,
    description: str,
    required_skills: List[str],
    budget: float,
    start_date: datetime,
    estimated_end_date: datetime,
    application_deadline: datetime,
) -> Optional[Error]:
    """Returns the first failed rule, or None when all fields are valid"""
    if not title or len(title.strip()) == 0:
        return _invalid("Title is required", "title")
    if len(title.strip()) > TITLE_MAX_LENGTH:
        return _invalid(f"Title must be less than {TITLE_MAX_LENGTH} characters", "title")

    description = (description or "").strip()
    if len(description) < DESCRIPTION_MIN_LENGTH:
        return _invalid(
            f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters", "description"
        )
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return _invalid(
            f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters", "description"
        )

    if not [skill for skill in (required_skills or []) if skill and skill.strip()]:
        return _invalid("At least one skill is required", "required_skills")

    if budget is None or budget < 0:
        return _invalid("Budget must be a positive number", "budget")

    if estimated_end_date <= start_date:
        return _invalid("End date must be after start date", "estimated_end_date")
    if application_deadline > start_date:
        return _invalid(
            "Application deadline must be before or on start date", "application_deadline"
        )

    return None


def clean_skills(required_skills: List[str]) -> List[str]:
    """Strip blanks and duplicates, keeping first-seen order"""
    seen = []
    for skill in required_skills or []:
        skill = skill.strip() if skill else ""
        if skill and skill not in seen:
            seen.append(skill)
    return seen


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored timestamps are naive UTC, like datetime.utcnow()"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)

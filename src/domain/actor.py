from dataclasses import dataclass
from src.domain.enums import UserRole


@dataclass(frozen=True)
class Actor:
    """Resolved identity of the caller of an operation"""

    account_id: str
    role: UserRole

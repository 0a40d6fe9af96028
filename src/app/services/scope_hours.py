from typing import Dict, Mapping, Optional
from src.domain.enums import ProjectScope, value_of

DEFAULT_SCOPE_HOURS: Dict[str, int] = {
    ProjectScope.BEGINNER.value: 20,
    ProjectScope.INTERMEDIATE.value: 40,
    ProjectScope.ADVANCED.value: 100,
    ProjectScope.EXPERT.value: 200,
}


def hours_for_scope(scope: ProjectScope, table: Optional[Mapping[str, int]] = None) -> int:
    """Hours credited to the assigned student when a project of this scope completes"""
    table = table if table is not None else DEFAULT_SCOPE_HOURS
    return int(table.get(value_of(scope), 0))

from libs.result import Result
from src.domain import Project
from src.domain.lifecycle import Transition, decide_archive, decide_unarchive
from .transition_use_case import OwnerProjectTransitionUseCase


class ArchiveProjectUseCase(OwnerProjectTransitionUseCase):
    """DRAFT or OPEN -> ARCHIVED (the "delete" offered to owners)"""

    event_type = "project_archived"

    def decide(self, project: Project) -> Result[Transition]:
        return decide_archive(project)


class UnarchiveProjectUseCase(OwnerProjectTransitionUseCase):
    """ARCHIVED -> OPEN"""

    event_type = "project_unarchived"

    def decide(self, project: Project) -> Result[Transition]:
        return decide_unarchive(project)

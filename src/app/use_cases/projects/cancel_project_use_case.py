from libs.result import Result
from src.domain import Project
from src.domain.lifecycle import Transition, decide_cancel
from .transition_use_case import OwnerProjectTransitionUseCase


class CancelProjectUseCase(OwnerProjectTransitionUseCase):
    """OPEN -> CANCELLED, terminal"""

    event_type = "project_cancelled"

    def decide(self, project: Project) -> Result[Transition]:
        return decide_cancel(project)

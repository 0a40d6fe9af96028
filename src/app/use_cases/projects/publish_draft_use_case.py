from libs.result import Result
from src.domain import Project
from src.domain.lifecycle import Transition, decide_publish
from .transition_use_case import OwnerProjectTransitionUseCase


class PublishDraftUseCase(OwnerProjectTransitionUseCase):
    """DRAFT -> OPEN; the project becomes publicly listed"""

    event_type = "project_published"

    def decide(self, project: Project) -> Result[Transition]:
        return decide_publish(project)

from .notify_project_completion_use_case import NotifyProjectCompletionUseCase
from .replay_dead_letter_events_use_case import (
    ListDeadLetterEventsUseCase,
    ReplayDeadLetterEventsUseCase,
)
from .dtos import (
    DeadLetterEventDTO,
    ListDeadLetterEventsResponse,
    ReplayDeadLetterEventsResponse,
)

__all__ = [
    "NotifyProjectCompletionUseCase",
    "ListDeadLetterEventsUseCase",
    "ReplayDeadLetterEventsUseCase",
    "DeadLetterEventDTO",
    "ListDeadLetterEventsResponse",
    "ReplayDeadLetterEventsResponse",
]

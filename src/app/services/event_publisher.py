from abc import ABC, abstractmethod
from src.domain.events import ProjectCompletedEvent


class EventPublisher(ABC):
    """
    Hands committed lifecycle events to downstream consumers.

    publish() must not raise: delivery is best-effort and a failed hand-off
    is logged by the implementation.
    """

    @abstractmethod
    async def publish(self, event: ProjectCompletedEvent) -> None:
        pass

"""In-process event bus for completion events

Events published by request handlers are queued here and consumed by the
completion worker running in the same event loop.
"""
import asyncio
import logging
from typing import Optional
from src.app.services.event_publisher import EventPublisher
from src.domain.events import ProjectCompletedEvent

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventPublisher):

    def __init__(self, maxsize: int = 1000):
        self.queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)

    async def publish(self, event: ProjectCompletedEvent) -> None:
        try:
            self.queue.put_nowait(event)
            logger.info(f"Queued {event.event_type} event {event.event_id} for project {event.project_id}")
        except asyncio.QueueFull:
            logger.error(
                f"Event queue full, dropping {event.event_type} event {event.event_id} "
                f"for account {event.account_id}"
            )

    async def get(self, timeout: Optional[float] = None) -> Optional[ProjectCompletedEvent]:
        """Next event, or None if nothing arrives within timeout"""
        if timeout is None:
            return await self.queue.get()
        try:
            return await asyncio.wait_for(self.queue.get(), timeout)
        except asyncio.TimeoutError:
            return None

    def task_done(self) -> None:
        self.queue.task_done()

    def pending(self) -> int:
        return self.queue.qsize()

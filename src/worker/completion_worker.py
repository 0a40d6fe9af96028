"""Completion Worker

Background worker that delivers ProjectCompletedEvent messages to the
stats/badge service. Runs as an asyncio task inside the API process.
"""
import logging
from typing import Callable
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.in_memory_event_bus import InMemoryEventBus
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.stats_notifier import StatsNotifier
from src.app.use_cases.stats import NotifyProjectCompletionUseCase
from src.domain.events import ProjectCompletedEvent

logger = logging.getLogger(__name__)


class CompletionWorker:
    """
    Consumes completion events from the bus, one at a time.

    A failed delivery is dead-lettered by the use case; the worker itself
    only guards the loop so that no event can stop it.
    """

    def __init__(
        self,
        event_bus: InMemoryEventBus,
        stats_notifier: StatsNotifier,
        session_factory: Callable[[], AsyncSession],
        poll_interval: float = 1.0,
    ):
        """
        Initialize CompletionWorker.

        Args:
            event_bus: Queue the completion events are published to
            stats_notifier: Client for the stats/badge service
            session_factory: Creates a database session per event (dead letters)
            poll_interval: Seconds to wait for an event before re-checking running
        """
        self.event_bus = event_bus
        self.stats_notifier = stats_notifier
        self.session_factory = session_factory
        self.poll_interval = poll_interval
        self.running = False

    async def start(self):
        """Process events until stop() is called."""
        self.running = True
        logger.info("CompletionWorker started")

        while self.running:
            event = await self.event_bus.get(timeout=self.poll_interval)
            if event is None:
                continue
            try:
                await self.handle(event)
            except Exception as e:
                logger.error(f"Error processing completion event {event.event_id}: {e}")
            finally:
                self.event_bus.task_done()

    async def stop(self):
        """Stop the completion worker."""
        self.running = False
        logger.info("CompletionWorker stopped")

    async def handle(self, event: ProjectCompletedEvent):
        logger.info(
            f"Processing completion event {event.event_id} for project {event.project_id}"
        )
        async with self.session_factory() as session:
            use_case = NotifyProjectCompletionUseCase(
                uow=SqlAlchemyUnitOfWork(session),
                stats_notifier=self.stats_notifier,
            )
            result = await use_case.execute(event)

        if result.is_err():
            logger.error(
                f"Completion event {event.event_id} dead-lettered: {result.error.message}"
            )

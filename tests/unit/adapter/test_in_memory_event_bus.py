import pytest
from datetime import datetime
from src.adapter.services.in_memory_event_bus import InMemoryEventBus
from src.domain import ProjectScope
from src.domain.events import ProjectCompletedEvent


def completion_event(event_id="event-1"):
    return ProjectCompletedEvent(
        event_id=event_id,
        project_id="project-1",
        account_id="student-1",
        scope=ProjectScope.BEGINNER,
        hours_contributed=20,
        completed_at=datetime(2026, 3, 1),
    )


@pytest.mark.asyncio
async def test_events_come_out_in_order():
    bus = InMemoryEventBus()
    await bus.publish(completion_event("a"))
    await bus.publish(completion_event("b"))

    assert bus.pending() == 2
    assert (await bus.get()).event_id == "a"
    assert (await bus.get(timeout=0.1)).event_id == "b"


@pytest.mark.asyncio
async def test_get_returns_none_on_timeout():
    bus = InMemoryEventBus()

    assert await bus.get(timeout=0.01) is None


@pytest.mark.asyncio
async def test_full_queue_drops_event():
    bus = InMemoryEventBus(maxsize=1)
    await bus.publish(completion_event("a"))
    await bus.publish(completion_event("b"))

    assert bus.pending() == 1
    assert (await bus.get()).event_id == "a"

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from src.api.error import ClientError
from src.app.services.audit_service import AuditService
from src.app.services.stats_notifier import StatsNotifier
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work, get_audit_service, get_current_actor, get_stats_notifier
from src.domain import Actor
from src.app.use_cases.stats import (
    ListDeadLetterEventsUseCase,
    ListDeadLetterEventsResponse,
    ReplayDeadLetterEventsUseCase,
    ReplayDeadLetterEventsResponse,
)

router = APIRouter()


@router.get(
    "/dead-letter-events",
    response_model=ListDeadLetterEventsResponse,
    status_code=status.HTTP_200_OK,
)
async def list_dead_letter_events(
    limit: Optional[int] = Query(None, ge=1),
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Unresolved completion events, oldest first (admin only)"""
    result = await ListDeadLetterEventsUseCase(uow, actor).execute(limit)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/dead-letter-events/replay",
    response_model=ReplayDeadLetterEventsResponse,
    status_code=status.HTTP_200_OK,
)
async def replay_dead_letter_events(
    limit: int = Query(50, ge=1, le=500),
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    stats_notifier: StatsNotifier = Depends(get_stats_notifier),
    audit_service: AuditService = Depends(get_audit_service),
):
    """Resend unresolved completion events to the stats service (admin only)"""
    use_case = ReplayDeadLetterEventsUseCase(uow, actor, stats_notifier, audit_service)
    result = await use_case.execute(limit)

    if result.is_err():
        raise ClientError(result.error)

    return result.value

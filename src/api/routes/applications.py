from typing import Optional
from fastapi import APIRouter, Depends, status
from config import ApplicationConfig
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.depends import get_unit_of_work, get_audit_service, get_current_actor
from src.domain import Actor
from src.app.use_cases.applications import (
    ApproveApplicationUseCase,
    ApproveApplicationResponseDTO,
    RejectApplicationUseCase,
    WithdrawApplicationUseCase,
    AcknowledgeApplicationUseCase,
    ListMyApplicationsUseCase,
    ListApplicationsResponseDTO,
    ApplicationDTO,
)

router = APIRouter()


@router.get(
    "/applications/mine",
    response_model=ListApplicationsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_my_applications(
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """The caller's applications, pending first"""
    result = await ListMyApplicationsUseCase(uow, actor).execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/applications/{application_id}/approve",
    response_model=ApproveApplicationResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def approve_application(
    application_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    """Accept an application and assign the project to the applicant"""
    use_case = ApproveApplicationUseCase(
        uow,
        actor,
        audit_service,
        auto_reject_competing=ApplicationConfig.AUTO_REJECT_COMPETING_APPLICATIONS,
    )
    result = await use_case.execute(application_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/applications/{application_id}/reject",
    response_model=ApplicationDTO,
    status_code=status.HTTP_200_OK,
)
async def reject_application(
    application_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    result = await RejectApplicationUseCase(uow, actor, audit_service).execute(application_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/applications/{application_id}/withdraw",
    response_model=ApplicationDTO,
    status_code=status.HTTP_200_OK,
)
async def withdraw_application(
    application_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    result = await WithdrawApplicationUseCase(uow, actor, audit_service).execute(application_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/applications/{application_id}/acknowledge",
    response_model=ApplicationDTO,
    status_code=status.HTTP_200_OK,
)
async def acknowledge_application(
    application_id: str,
    actor: Optional[Actor] = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Mark the latest status change as seen"""
    result = await AcknowledgeApplicationUseCase(uow, actor).execute(application_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value

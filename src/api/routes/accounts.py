from fastapi import APIRouter, Depends, status
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work
from src.app.use_cases.projects import GetCompletedProjectsUseCase, GetProjectsResponse

router = APIRouter()


@router.get(
    "/accounts/{account_id}/completed-projects",
    response_model=GetProjectsResponse,
    status_code=status.HTTP_200_OK,
)
async def get_completed_projects(
    account_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Projects completed by an account, most recent first"""
    result = await GetCompletedProjectsUseCase(uow).execute(account_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value

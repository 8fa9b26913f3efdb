from fastapi import APIRouter, Depends, status

from beta_inviter.api.error import ServerError
from beta_inviter.api.utils.admin_auth import verify_admin_token
from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.app.use_cases.dashboard import (
    DashboardStatsResponse,
    GetDashboardStatsUseCase,
)
from beta_inviter.depends import get_unit_of_work

router = APIRouter(tags=["Dashboard"], dependencies=[Depends(verify_admin_token)])


@router.get(
    "/dashboard-stats",
    status_code=status.HTTP_200_OK,
    response_model=DashboardStatsResponse,
)
async def get_dashboard_stats(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Dashboard Stats

    Invite code and waitlist aggregates, recomputed from every row per request.
    """
    use_case = GetDashboardStatsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value

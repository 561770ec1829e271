"""Dashboard endpoint."""

from fastapi import APIRouter, status

from app.dependencies import CurrentAccountId, DashboardServiceDep
from app.schemas.dashboard import DashboardResponse

router = APIRouter()


@router.get(
    "/",
    response_model=DashboardResponse,
    status_code=status.HTTP_200_OK,
    tags=["Dashboard"],
    summary="Dashboard",
)
async def get_dashboard(
    account_id: CurrentAccountId,
    dashboard: DashboardServiceDep,
) -> DashboardResponse:
    """
    Get KPIs for today and this month, revenue per month for the last 12
    months, the latest completed appointments and recently updated clients.
    """
    return await dashboard.get_dashboard(account_id)

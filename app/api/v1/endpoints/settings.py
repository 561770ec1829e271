"""Business settings endpoints."""

from fastapi import APIRouter, status

from app.dependencies import CurrentAccountId, SettingsServiceDep
from app.schemas.business_settings import (
    BlockedPeriodCreate,
    BusinessSettingsResponse,
    BusinessSettingsUpdate,
)

router = APIRouter()


@router.get(
    "/",
    response_model=BusinessSettingsResponse,
    status_code=status.HTTP_200_OK,
    tags=["Settings"],
    summary="Get business settings",
)
async def get_settings(
    account_id: CurrentAccountId,
    business_settings: SettingsServiceDep,
) -> BusinessSettingsResponse:
    """Get the business settings, or the defaults when none were saved."""
    return await business_settings.get_settings(account_id)


@router.put(
    "/",
    response_model=BusinessSettingsResponse,
    status_code=status.HTTP_200_OK,
    tags=["Settings"],
    summary="Update business settings",
)
async def update_settings(
    data: BusinessSettingsUpdate,
    account_id: CurrentAccountId,
    business_settings: SettingsServiceDep,
) -> BusinessSettingsResponse:
    """
    Update business name and opening hours.

    Omitted fields keep their current value.
    """
    return await business_settings.update_settings(account_id, data)


@router.post(
    "/blocked-periods",
    response_model=BusinessSettingsResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Settings"],
    summary="Block a time range",
)
async def add_blocked_period(
    data: BlockedPeriodCreate,
    account_id: CurrentAccountId,
    business_settings: SettingsServiceDep,
) -> BusinessSettingsResponse:
    """Block a time range on a day; new bookings may not intersect it."""
    return await business_settings.add_blocked_period(account_id, data)


@router.delete(
    "/blocked-periods/{period_id}",
    response_model=BusinessSettingsResponse,
    status_code=status.HTTP_200_OK,
    tags=["Settings"],
    summary="Remove a blocked period",
)
async def remove_blocked_period(
    period_id: str,
    account_id: CurrentAccountId,
    business_settings: SettingsServiceDep,
) -> BusinessSettingsResponse:
    return await business_settings.remove_blocked_period(account_id, period_id)

"""Ledger (finances) endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies import CurrentAccountId, LedgerServiceDep
from app.schemas.ledger import LedgerEntryCreate, LedgerEntryResponse, LedgerSummary

router = APIRouter()


@router.get(
    "/",
    response_model=list[LedgerEntryResponse],
    status_code=status.HTTP_200_OK,
    tags=["Ledger"],
    summary="List ledger entries",
)
async def list_entries(
    account_id: CurrentAccountId,
    ledger: LedgerServiceDep,
    day: date | None = Query(None, alias="date", description="Local calendar day"),
) -> list[LedgerEntryResponse]:
    """List ledger entries newest first, optionally for a single day."""
    return await ledger.list_entries(account_id, day)


@router.get(
    "/summary",
    response_model=LedgerSummary,
    status_code=status.HTTP_200_OK,
    tags=["Ledger"],
    summary="Net totals",
)
async def get_summary(
    account_id: CurrentAccountId,
    ledger: LedgerServiceDep,
) -> LedgerSummary:
    """Net totals (in minus out) for today, this month and this year."""
    return await ledger.get_summary(account_id)


@router.post(
    "/",
    response_model=LedgerEntryResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Ledger"],
    summary="Create ledger entry",
)
async def create_entry(
    data: LedgerEntryCreate,
    account_id: CurrentAccountId,
    ledger: LedgerServiceDep,
) -> LedgerEntryResponse:
    """Record a manual cash movement (income or expense)."""
    return await ledger.create_entry(account_id, data)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Ledger"],
    summary="Delete ledger entry",
)
async def delete_entry(
    entry_id: UUID,
    account_id: CurrentAccountId,
    ledger: LedgerServiceDep,
) -> None:
    await ledger.delete_entry(account_id, entry_id)

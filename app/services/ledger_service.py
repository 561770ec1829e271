"""Ledger (cash flow) business logic."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID
from zoneinfo import ZoneInfo

import structlog

from app.core.clock import business_timezone, day_bounds, local_now
from app.core.exceptions import NotFoundException
from app.repositories.ledger import LedgerRepository
from app.schemas.ledger import (
    LedgerDirection,
    LedgerEntryCreate,
    LedgerEntryResponse,
    LedgerSummary,
)

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")


def signed_amount(entry: LedgerEntryResponse) -> Decimal:
    """Amount with its cash-flow sign: inbound positive, outbound negative."""
    return entry.amount if entry.direction == LedgerDirection.IN else -entry.amount


def net_total(entries: Iterable[LedgerEntryResponse]) -> Decimal:
    """In minus out."""
    return sum((signed_amount(e) for e in entries), ZERO)


def inbound_total(entries: Iterable[LedgerEntryResponse]) -> Decimal:
    return sum((e.amount for e in entries if e.direction == LedgerDirection.IN), ZERO)


def summarize(entries: Iterable[LedgerEntryResponse], now: datetime) -> LedgerSummary:
    """
    Net totals for the day, month and year containing ``now``.

    Entry timestamps are converted to the timezone of ``now`` before being
    bucketed.
    """
    day = month = year = ZERO
    for entry in entries:
        created = entry.created_at.astimezone(now.tzinfo)
        if created.year != now.year:
            continue
        amount = signed_amount(entry)
        year += amount
        if created.month == now.month:
            month += amount
            if created.day == now.day:
                day += amount
    return LedgerSummary(day=day, month=month, year=year)


class LedgerService:
    """Service for ledger entries."""

    def __init__(self, repository: LedgerRepository, tz: ZoneInfo | None = None):
        """Initialize service with repository and business timezone."""
        self.repository = repository
        self.tz = tz or business_timezone()

    async def list_entries(
        self, owner_id: UUID, day: date | None = None
    ) -> list[LedgerEntryResponse]:
        """
        List entries newest first.

        Args:
            owner_id: Account owning the entries
            day: Optional local calendar day to restrict the listing to
        """
        start = end = None
        if day is not None:
            start, end = day_bounds(day, self.tz)

        rows = await self.repository.list_between(owner_id, start, end)
        return [LedgerEntryResponse.model_validate(row) for row in rows]

    async def list_since(self, owner_id: UUID, start: datetime) -> list[LedgerEntryResponse]:
        rows = await self.repository.list_between(owner_id, start=start)
        return [LedgerEntryResponse.model_validate(row) for row in rows]

    async def create_entry(self, owner_id: UUID, data: LedgerEntryCreate) -> LedgerEntryResponse:
        """Record a manual cash movement."""
        values = data.model_dump(mode="json")
        values["amount"] = data.amount
        values["note"] = data.note.strip()

        row = await self.repository.create(owner_id, values)

        logger.info(
            "ledger_entry_created",
            owner_id=str(owner_id),
            entry_id=str(row["id"]),
            direction=values["direction"],
            category=values["category"],
        )
        return LedgerEntryResponse.model_validate(row)

    async def delete_entry(self, owner_id: UUID, entry_id: UUID) -> None:
        """
        Delete a ledger entry.

        Raises:
            NotFoundException: If the entry does not exist
        """
        if not await self.repository.delete(owner_id, entry_id):
            raise NotFoundException("Ledger entry not found")
        logger.info("ledger_entry_deleted", owner_id=str(owner_id), entry_id=str(entry_id))

    async def get_summary(self, owner_id: UUID, now: datetime | None = None) -> LedgerSummary:
        """Net totals for today, this month and this year in the business timezone."""
        now = (now or local_now(self.tz)).astimezone(self.tz)
        year_start, _ = day_bounds(date(now.year, 1, 1), self.tz)

        entries = await self.list_since(owner_id, year_start)
        return summarize(entries, now)

"""Dashboard aggregation."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID
from zoneinfo import ZoneInfo

from app.core.clock import business_timezone, day_bounds, local_now, month_start
from app.schemas.dashboard import (
    DashboardKpis,
    DashboardResponse,
    MonthlyRevenue,
    RecentAppointment,
)
from app.schemas.ledger import LedgerEntryResponse
from app.services.appointment_service import AppointmentService
from app.services.client_service import ClientService
from app.services.ledger_service import LedgerService, inbound_total, net_total

REVENUE_MONTHS = 12
RECENT_LIMIT = 5


def monthly_revenue(
    entries: Iterable[LedgerEntryResponse],
    today: date,
    tz: ZoneInfo,
    months: int = REVENUE_MONTHS,
) -> list[MonthlyRevenue]:
    """
    Inbound totals per calendar month, oldest first.

    Covers the ``months`` months ending with the month of ``today``; months
    without entries are reported as zero.
    """
    totals = {
        month_start(today, back).strftime("%Y-%m"): Decimal("0")
        for back in range(months - 1, -1, -1)
    }
    for entry in entries:
        key = entry.created_at.astimezone(tz).strftime("%Y-%m")
        if key in totals:
            totals[key] += inbound_total([entry])
    return [MonthlyRevenue(month=key, amount=amount) for key, amount in totals.items()]


def compute_kpis(
    entries: Iterable[LedgerEntryResponse],
    completed_today: int,
    now: datetime,
) -> DashboardKpis:
    """Headline numbers for the day and month containing ``now``."""
    tz = now.tzinfo
    today_entries = []
    month_entries = []
    for entry in entries:
        local = entry.created_at.astimezone(tz)
        if (local.year, local.month) != (now.year, now.month):
            continue
        month_entries.append(entry)
        if local.day == now.day:
            today_entries.append(entry)

    return DashboardKpis(
        income_today=inbound_total(today_entries),
        revenue_month=inbound_total(month_entries),
        cash_balance_month=net_total(month_entries),
        completed_today=completed_today,
    )


class DashboardService:
    """Builds the dashboard from ledger, appointments and clients."""

    def __init__(
        self,
        ledger: LedgerService,
        appointments: AppointmentService,
        clients: ClientService,
        tz: ZoneInfo | None = None,
    ):
        self.ledger = ledger
        self.appointments = appointments
        self.clients = clients
        self.tz = tz or business_timezone()

    async def get_dashboard(self, owner_id: UUID, now: datetime | None = None) -> DashboardResponse:
        """
        Aggregate the owner's dashboard.

        Args:
            owner_id: Account owning the data
            now: Reference time, defaults to the current business-local time

        Returns:
            KPIs, last 12 months of revenue, recent completions and clients
        """
        now = (now or local_now(self.tz)).astimezone(self.tz)
        today = now.date()

        window_start, _ = day_bounds(month_start(today, REVENUE_MONTHS - 1), self.tz)
        today_start, _ = day_bounds(today, self.tz)

        entries = await self.ledger.list_since(owner_id, window_start)
        completed_today = await self.appointments.list_completed(owner_id, since=today_start)
        recent = await self.appointments.list_completed(owner_id, limit=RECENT_LIMIT)
        recent_clients = await self.clients.list_recent(owner_id, RECENT_LIMIT)

        return DashboardResponse(
            kpis=compute_kpis(entries, len(completed_today), now),
            monthly_revenue=monthly_revenue(entries, today, self.tz),
            recent_appointments=[
                RecentAppointment.model_validate(a.model_dump()) for a in recent
            ],
            recent_clients=recent_clients,
        )

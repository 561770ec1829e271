"""Business-local calendar helpers."""

from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from app.config import settings


def business_timezone() -> ZoneInfo:
    """Timezone that defines "today" and "this month" for the studio."""
    return ZoneInfo(settings.business_timezone)


def local_now(tz: ZoneInfo | None = None) -> datetime:
    """Current time in the business timezone."""
    return datetime.now(UTC).astimezone(tz or business_timezone())


def day_bounds(day: date, tz: ZoneInfo | None = None) -> tuple[datetime, datetime]:
    """[start, end) of a local calendar day as aware datetimes."""
    tz = tz or business_timezone()
    start = datetime.combine(day, time.min, tzinfo=tz)
    return start, datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)


def month_start(day: date, months_back: int = 0) -> date:
    """First day of the month containing ``day``, shifted ``months_back`` months earlier."""
    index = day.year * 12 + (day.month - 1) - months_back
    return date(index // 12, index % 12 + 1, 1)

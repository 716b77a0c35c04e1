"""Channel age from its creation timestamp.

Two independent figures are produced:
- a civil-calendar age ("3 years, 11 months, 24 days"), borrowing the length
  of the month before "now" when the day component goes negative;
- a flat count of whole elapsed days, truncated toward zero.

They are not derivable from one another. A creation instant in the future
yields negative components; nothing is clamped.
"""

import calendar
from datetime import datetime, timedelta, timezone

from models import ChannelAge

_MS_PER_DAY = 24 * 60 * 60 * 1000


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as sent by YouTube (``...Z``). Naive means UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _days_in_previous_month(moment: datetime) -> int:
    if moment.month == 1:
        return calendar.monthrange(moment.year - 1, 12)[1]
    return calendar.monthrange(moment.year, moment.month - 1)[1]


def compute_age(created: datetime, now: datetime | None = None) -> ChannelAge:
    if now is None:
        now = datetime.now(timezone.utc)
    created = created.astimezone(timezone.utc)
    now = now.astimezone(timezone.utc)

    years = now.year - created.year
    months = now.month - created.month
    days = now.day - created.day

    if days < 0:
        months -= 1
        days += _days_in_previous_month(now)

    if months < 0:
        years -= 1
        months += 12

    elapsed_ms = (now - created) // timedelta(milliseconds=1)
    whole_days = abs(elapsed_ms) // _MS_PER_DAY
    if elapsed_ms < 0:
        whole_days = -whole_days

    return ChannelAge(
        human_readable=f"{years} years, {months} months, {days} days",
        days=whole_days,
    )

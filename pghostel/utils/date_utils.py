"""
Date helpers for billing months.

A billing month is identified by a "YYYY-MM" token. Rent falls due on a
fixed day of that month.
"""

import calendar
import re
from datetime import date, datetime, timezone
from typing import NamedTuple, Optional

from pghostel.core.constants import MONTH_TOKEN_FORMAT_MESSAGE, RENT_DUE_DAY
from pghostel.core.exceptions import ValidationError

UTC = timezone.utc

_MONTH_TOKEN_RE = re.compile(r"[0-9]{4}-[0-9]{2}")


class BillingMonth(NamedTuple):
    """Parsed "YYYY-MM" token."""

    token: str
    year: int
    month: int

    @property
    def month_name(self) -> str:
        """English month name, e.g. "May"."""
        return calendar.month_name[self.month]

    def due_date(self, day: int = RENT_DUE_DAY) -> date:
        """Rent due date within this month, clamped to the month's length."""
        last_day = calendar.monthrange(self.year, self.month)[1]
        return date(self.year, self.month, min(day, last_day))


def now_utc() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


def today_utc() -> date:
    """Return today's date in UTC."""
    return now_utc().date()


def parse_month_token(value: Optional[str]) -> BillingMonth:
    """
    Parse a "YYYY-MM" token.

    Raises:
        ValidationError: If the value is missing, malformed or the month
            part is outside 01-12.
    """
    if not isinstance(value, str) or not _MONTH_TOKEN_RE.fullmatch(value):
        raise ValidationError(MONTH_TOKEN_FORMAT_MESSAGE)

    year, month = int(value[:4]), int(value[5:])
    if not 1 <= month <= 12:
        raise ValidationError(MONTH_TOKEN_FORMAT_MESSAGE)
    return BillingMonth(value, year, month)


def current_month_token(today: Optional[date] = None) -> str:
    """Token of the month containing ``today`` (UTC today by default)."""
    today = today or today_utc()
    return f"{today.year:04d}-{today.month:02d}"

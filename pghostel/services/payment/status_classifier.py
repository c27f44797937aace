"""
Rent payment status classification.

Status is always derived from the amounts and the due date; it is never
taken from the client.
"""

import math
from datetime import date, datetime
from typing import Any, Optional, Union

from pghostel.schemas.common.enums import PaymentStatus
from pghostel.utils.date_utils import today_utc

DateLike = Union[date, datetime, str, None]


def _to_amount(value: Any) -> float:
    """Numeric value of ``value``; anything non-numeric or NaN counts as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def _to_day(value: DateLike) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def classify_payment_status(
    amount: Any,
    paid_amount: Any,
    due_date: DateLike,
    now: DateLike = None,
) -> PaymentStatus:
    """
    Classify a payment.

    Rules, first match wins:
        1. something paid, covering the amount  -> paid
        2. something paid, short of the amount  -> partial
        3. nothing paid, past the due day       -> overdue
        4. otherwise                            -> pending

    Dates are compared by calendar day, so a payment is not overdue on
    its due day. A missing or unparseable due date is never overdue.

    Args:
        amount: Amount billed
        paid_amount: Amount received so far
        due_date: Due date of the bill
        now: Reference date, defaults to today (UTC)
    """
    billed = _to_amount(amount)
    paid = _to_amount(paid_amount)

    if paid > 0:
        return PaymentStatus.PAID if paid >= billed else PaymentStatus.PARTIAL

    due = _to_day(due_date)
    today = _to_day(now) or today_utc()
    if due is not None and today > due:
        return PaymentStatus.OVERDUE
    return PaymentStatus.PENDING

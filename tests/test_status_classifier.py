from datetime import date, datetime

import pytest

from pghostel.schemas.common.enums import PaymentStatus
from pghostel.services.payment.status_classifier import classify_payment_status

DUE = date(2024, 5, 5)


@pytest.mark.parametrize(
    "amount, paid, due, now, expected",
    [
        (1000, 1000, DUE, date(2024, 6, 1), PaymentStatus.PAID),
        (1000, 1200, DUE, date(2024, 6, 1), PaymentStatus.PAID),
        (1000, 400, DUE, date(2024, 6, 1), PaymentStatus.PARTIAL),
        (1000, 400, DUE, date(2024, 5, 1), PaymentStatus.PARTIAL),
        (1000, 0, "2024-01-01", "2024-02-01", PaymentStatus.OVERDUE),
        (1000, 0, "2024-03-01", "2024-02-01", PaymentStatus.PENDING),
    ],
)
def test_classification_rules(amount, paid, due, now, expected):
    assert classify_payment_status(amount, paid, due, now) == expected


def test_due_day_itself_is_not_overdue():
    assert classify_payment_status(1000, 0, DUE, DUE) == PaymentStatus.PENDING
    assert classify_payment_status(1000, 0, DUE, datetime(2024, 5, 5, 23, 59)) == PaymentStatus.PENDING
    assert classify_payment_status(1000, 0, DUE, date(2024, 5, 6)) == PaymentStatus.OVERDUE


def test_missing_due_date_is_never_overdue():
    assert classify_payment_status(1000, 0, None, date(2030, 1, 1)) == PaymentStatus.PENDING


def test_non_numeric_amounts_count_as_zero():
    assert classify_payment_status(float("nan"), "abc", DUE, date(2024, 5, 1)) == PaymentStatus.PENDING
    assert classify_payment_status(None, None, DUE, date(2024, 6, 1)) == PaymentStatus.OVERDUE
    assert classify_payment_status("1000", "1000", DUE, date(2024, 6, 1)) == PaymentStatus.PAID


def test_zero_amount_falls_through_to_due_date():
    assert classify_payment_status(0, 0, DUE, date(2024, 5, 1)) == PaymentStatus.PENDING
    assert classify_payment_status(-50, 0, DUE, date(2024, 6, 1)) == PaymentStatus.OVERDUE


def test_something_paid_against_zero_amount_is_paid():
    assert classify_payment_status(0, 10, DUE, date(2024, 6, 1)) == PaymentStatus.PAID


def test_defaults_to_today():
    assert classify_payment_status(1000, 0, date(2000, 1, 1)) == PaymentStatus.OVERDUE
    assert classify_payment_status(1000, 0, date(9999, 1, 1)) == PaymentStatus.PENDING

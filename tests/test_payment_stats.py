from pghostel.repositories import RentPaymentRepository
from pghostel.schemas.common.enums import PaymentStatus
from pghostel.services.payment import PaymentStatsService
from pghostel.services.payment.payment_stats import collection_rate


def stats(db, month=None):
    return PaymentStatsService(RentPaymentRepository(db), db).stats(month).unwrap()


def test_empty_store_gives_zeros(db):
    figures = stats(db)
    assert figures["total"] == 0
    assert figures["total_amount"] == 0
    assert figures["collected_amount"] == 0
    assert figures["collection_rate"] == 0


def test_month_report(db, add_room, add_tenant, add_payment):
    room = add_room()
    john = add_tenant("John Doe", "john@example.com", room)
    sarah = add_tenant("Sarah Wilson", "sarah@example.com", room)
    add_payment(john, "2024-05", amount=1000, paid_amount=1000, status=PaymentStatus.PAID)
    add_payment(sarah, "2024-05", amount=2000, paid_amount=500, status=PaymentStatus.PARTIAL)
    add_payment(john, "2024-04", amount=1000, paid_amount=0, status=PaymentStatus.OVERDUE)

    may = stats(db, "2024-05")
    assert may["total"] == 2
    assert may["paid"] == 1
    assert may["partial"] == 1
    assert may["overdue"] == 0
    assert may["total_amount"] == 3000
    assert may["collected_amount"] == 1500
    assert may["pending_amount"] == 1500
    assert may["overdue_amount"] == 0
    assert may["collection_rate"] == 50

    everything = stats(db)
    assert everything["total"] == 3
    assert everything["overdue"] == 1
    assert everything["overdue_amount"] == 1000
    assert everything["collection_rate"] == 38


def test_zero_billed_total_has_zero_rate(db, add_room, add_tenant, add_payment):
    room = add_room()
    tenant = add_tenant("John Doe", "john@example.com", room)
    add_payment(tenant, amount=0, paid_amount=0)

    assert stats(db)["collection_rate"] == 0


def test_collection_rate_rounds_half_up():
    assert collection_rate(1, 8) == 13
    assert collection_rate(1, 200) == 1
    assert collection_rate(1, 3) == 33
    assert collection_rate(0, 0) == 0

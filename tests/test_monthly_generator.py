from datetime import date

from sqlalchemy import select

from pghostel.models import RentPayment
from pghostel.repositories import RentPaymentRepository, TenantRepository
from pghostel.schemas.common.enums import PaymentStatus, TenantStatus, Wing
from pghostel.services.base import ErrorCode
from pghostel.services.payment import MonthlyPaymentGenerator


def make_generator(db, today=date(2024, 5, 1)):
    return MonthlyPaymentGenerator(
        RentPaymentRepository(db),
        TenantRepository(db),
        db,
        clock=lambda: today,
    )


def payments(db):
    return list(db.scalars(select(RentPayment)).all())


def test_creates_one_bill_per_active_tenant(db, add_room, add_tenant):
    room_a = add_room("101", Wing.A)
    room_b = add_room("101", Wing.B)
    add_tenant("John Doe", "john@example.com", room_a, rent=8000)
    add_tenant("David Brown", "david@example.com", room_b, rent=11000, wing="B")
    add_tenant("Gone Away", "gone@example.com", room_a, status=TenantStatus.INACTIVE)

    result = make_generator(db).generate("2024-05")

    assert result.is_success
    assert result.data == {"created": 2}

    created = sorted(payments(db), key=lambda p: p.amount)
    assert [p.amount for p in created] == [8000, 11000]
    first = created[0]
    assert first.month == "2024-05"
    assert first.year == 2024
    assert first.month_name == "May"
    assert first.due_date == date(2024, 5, 5)
    assert first.paid_amount == 0
    assert first.late_fee == 0
    assert first.status == PaymentStatus.PENDING
    assert first.room_id == room_a.id
    assert [p.wing for p in created] == ["A", "B"]


def test_second_run_creates_nothing(db, add_room, add_tenant):
    room = add_room()
    add_tenant("John Doe", "john@example.com", room)
    generator = make_generator(db)

    assert generator.generate("2024-05").data == {"created": 1}
    assert generator.generate("2024-05").data == {"created": 0}
    assert len(payments(db)) == 1


def test_bills_past_due_date_are_overdue(db, add_room, add_tenant):
    room = add_room()
    add_tenant("John Doe", "john@example.com", room)

    make_generator(db, today=date(2024, 5, 6)).generate("2024-05")

    assert payments(db)[0].status == PaymentStatus.OVERDUE


def test_malformed_month_is_rejected_without_writes(db, add_room, add_tenant):
    room = add_room()
    add_tenant("John Doe", "john@example.com", room)
    generator = make_generator(db)

    for token in ("2024-5", "2024-13", "2024-00", "May 2024", "", None):
        result = generator.generate(token)
        assert not result.is_success
        assert result.error.code == ErrorCode.VALIDATION_ERROR
        assert result.error.message == "month is required in YYYY-MM format"

    assert payments(db) == []


def test_wing_falls_back_to_room_then_default(db, add_room, add_tenant):
    room = add_room("201", Wing.B)
    tenant = add_tenant("No Wing", "nowing@example.com", room, wing="B")
    tenant.wing = ""
    db.commit()

    make_generator(db).generate("2024-06")
    assert payments(db)[0].wing == "B"

    db.delete(room)
    db.commit()
    make_generator(db).generate("2024-07")
    july = [p for p in payments(db) if p.month == "2024-07"]
    assert july[0].wing == "A"


def test_token_with_trailing_newline_does_not_bill_twice(db, add_room, add_tenant):
    room = add_room()
    add_tenant("John Doe", "john@example.com", room)
    generator = make_generator(db)

    assert generator.generate("2024-05").data == {"created": 1}
    result = generator.generate("2024-05\n")

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert [p.month for p in payments(db)] == ["2024-05"]

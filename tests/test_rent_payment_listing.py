from pghostel.repositories import RentPaymentRepository, TenantRepository
from pghostel.schemas.common.enums import PaymentStatus
from pghostel.schemas.rent_payment import RentPaymentFilters
from pghostel.services.payment import RentPaymentService


def list_payments(db, **filters):
    service = RentPaymentService(RentPaymentRepository(db), TenantRepository(db), db)
    result = service.list_payments(RentPaymentFilters(**filters))
    assert result.is_success
    return result.data


def seed(db, add_room, add_tenant, add_payment):
    room = add_room()
    john = add_tenant("John Doe", "john.doe@email.com", room)
    sarah = add_tenant("Sarah Wilson", "sarah.wilson@email.com", room, wing="B")
    add_payment(john, "2024-05", status=PaymentStatus.PAID, paid_amount=1000)
    add_payment(john, "2024-04", status=PaymentStatus.OVERDUE)
    add_payment(sarah, "2024-05", status=PaymentStatus.PENDING, wing="B")
    return john, sarah


def test_search_matches_name_case_insensitively(db, add_room, add_tenant, add_payment):
    john, _ = seed(db, add_room, add_tenant, add_payment)

    found = list_payments(db, search="doe")

    assert len(found) == 2
    assert {p.tenant_id for p in found} == {john.id}
    assert all(p.tenant.name == "John Doe" for p in found)


def test_search_matches_email(db, add_room, add_tenant, add_payment):
    _, sarah = seed(db, add_room, add_tenant, add_payment)

    found = list_payments(db, search="SARAH.WILSON@")

    assert [p.tenant_id for p in found] == [sarah.id]


def test_search_without_matches_returns_nothing(db, add_room, add_tenant, add_payment):
    seed(db, add_room, add_tenant, add_payment)

    assert list_payments(db, search="zzz-no-match") == []


def test_search_treats_wildcards_literally(db, add_room, add_tenant, add_payment):
    seed(db, add_room, add_tenant, add_payment)

    assert list_payments(db, search="%") == []


def test_filters_combine(db, add_room, add_tenant, add_payment):
    seed(db, add_room, add_tenant, add_payment)

    assert len(list_payments(db)) == 3
    assert len(list_payments(db, month="2024-05")) == 2
    assert len(list_payments(db, month="2024-05", wing="B")) == 1
    assert len(list_payments(db, status="overdue")) == 1
    assert len(list_payments(db, status="paid", search="sarah")) == 0


def test_all_sentinel_disables_filter(db, add_room, add_tenant, add_payment):
    seed(db, add_room, add_tenant, add_payment)

    assert len(list_payments(db, status="all", wing="all")) == 3


def test_missing_references_are_none(db, add_room, add_tenant, add_payment):
    john, _ = seed(db, add_room, add_tenant, add_payment)
    room_id = john.room_id
    db.delete(john)
    db.commit()

    orphans = [p for p in list_payments(db) if p.tenant is None]

    assert len(orphans) == 2
    assert all(p.room is not None and p.room.id == room_id for p in orphans)

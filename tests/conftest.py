from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from pghostel.db.init_db import init_db
from pghostel.db.session import build_session_factory
from pghostel.main import create_app
from pghostel.models import RentPayment, Room, Tenant
from pghostel.schemas.common.enums import PaymentStatus, RoomStatus, RoomType, TenantStatus, Wing


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = build_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    with TestClient(create_app(engine=engine)) as test_client:
        yield test_client


@pytest.fixture
def add_room(db):
    def _add(room_number="101", wing=Wing.A, rent=8000, **extra):
        room = Room(
            room_number=room_number,
            floor=extra.pop("floor", 1),
            wing=wing,
            type=extra.pop("type", RoomType.SINGLE),
            rent=rent,
            status=extra.pop("status", RoomStatus.AVAILABLE),
            amenities=extra.pop("amenities", ["Wi-Fi"]),
            **extra,
        )
        db.add(room)
        db.commit()
        return room

    return _add


@pytest.fixture
def add_tenant(db):
    def _add(name, email, room, rent=8000, status=TenantStatus.ACTIVE, wing="A"):
        tenant = Tenant(
            name=name,
            email=email,
            phone="+91 9000000000",
            room_id=room.id,
            rent=rent,
            deposit=rent * 2,
            status=status,
            join_date=date(2024, 1, 15),
            emergency_contact={"name": "Kin", "phone": "+91 9000000001", "relation": "Father"},
            wing=wing,
            floor=room.floor,
        )
        db.add(tenant)
        db.commit()
        return tenant

    return _add


@pytest.fixture
def add_payment(db):
    def _add(tenant, month="2024-05", amount=1000, paid_amount=0, status=PaymentStatus.PENDING, wing="A"):
        year, month_number = int(month[:4]), int(month[5:])
        payment = RentPayment(
            tenant_id=tenant.id,
            room_id=tenant.room_id,
            month=month,
            year=year,
            month_name="May",
            amount=amount,
            paid_amount=paid_amount,
            due_date=date(year, month_number, 5),
            status=status,
            wing=wing,
        )
        db.add(payment)
        db.commit()
        return payment

    return _add


@pytest.fixture
def room_payload():
    return {
        "roomNumber": "101",
        "floor": 1,
        "wing": "A",
        "type": "single",
        "rent": 8000,
        "amenities": ["AC", "Wi-Fi"],
        "description": "Single occupancy room with attached bathroom",
    }


@pytest.fixture
def tenant_payload():
    def _payload(room_id, name="John Doe", email="john.doe@email.com"):
        return {
            "name": name,
            "email": email,
            "phone": "+91 9876543210",
            "roomId": room_id,
            "rent": 8000,
            "deposit": 16000,
            "joinDate": "2024-01-15",
            "emergencyContact": {"name": "Jane Doe", "phone": "+91 9876543211", "relation": "Father"},
            "wing": "A",
            "floor": 1,
        }

    return _payload

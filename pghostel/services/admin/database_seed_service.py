"""
Demo data seeding.

Populates an empty database with an admin account, rooms, tenants,
current-month rent payments and a few expenses. Does nothing when any
user, room or tenant already exists.
"""

from datetime import date
from typing import Callable, List

from sqlalchemy.orm import Session

from pghostel.models.expense import Expense
from pghostel.models.rent_payment import RentPayment
from pghostel.models.room import Room
from pghostel.models.tenant import Tenant
from pghostel.models.user import User
from pghostel.repositories import (
    ExpenseRepository,
    RentPaymentRepository,
    RoomRepository,
    TenantRepository,
    UserRepository,
)
from pghostel.schemas.common.enums import (
    ExpensePaymentMethod,
    ExpenseStatus,
    PaymentMethod,
    RoomStatus,
    RoomType,
    TenantStatus,
    UserRole,
    Wing,
)
from pghostel.services.base import BaseService, ServiceResult
from pghostel.services.payment.status_classifier import classify_payment_status
from pghostel.utils.date_utils import current_month_token, parse_month_token, today_utc
from pghostel.utils.security import hash_password

ALREADY_SEEDED_MESSAGE = "Database already has data"
SEEDED_MESSAGE = "Database initialized successfully"

ADMIN_EMAIL = "admin@sunflowerpg.com"
ADMIN_PASSWORD = "admin123"

_ROOMS = [
    ("101", 1, Wing.A, RoomType.SINGLE, 8000, ["AC", "Wi-Fi", "Food"], "Single occupancy room with attached bathroom"),
    ("102", 1, Wing.A, RoomType.DOUBLE, 12000, ["AC", "Wi-Fi", "Food"], "Double occupancy room with attached bathroom"),
    ("201", 2, Wing.A, RoomType.SINGLE, 8500, ["AC", "Wi-Fi", "Food"], "Single occupancy room with attached bathroom"),
    ("202", 2, Wing.A, RoomType.TRIPLE, 15000, ["AC", "Wi-Fi", "Food"], "Triple occupancy room with attached bathroom"),
    ("101", 1, Wing.B, RoomType.SINGLE, 7500, ["AC", "Wi-Fi"], "Single occupancy room with attached bathroom"),
    ("102", 1, Wing.B, RoomType.DOUBLE, 11000, ["AC", "Wi-Fi"], "Double occupancy room with attached bathroom"),
]

# (room index, name, email, phone, rent, deposit, join date, emergency contact, wing, floor)
_TENANTS = [
    (0, "John Doe", "john.doe@email.com", "+91 9876543210", 8000, 16000, date(2024, 1, 15),
     ("Jane Doe", "+91 9876543211", "Father"), "A", 1),
    (1, "Sarah Wilson", "sarah.wilson@email.com", "+91 9876543212", 12000, 24000, date(2024, 2, 1),
     ("Mike Wilson", "+91 9876543213", "Brother"), "A", 1),
    (3, "Alice Smith", "alice.smith@email.com", "+91 9876543214", 15000, 30000, date(2024, 1, 20),
     ("Bob Smith", "+91 9876543215", "Father"), "A", 2),
    (5, "David Brown", "david.brown@email.com", "+91 9876543216", 11000, 22000, date(2024, 3, 1),
     ("Emma Brown", "+91 9876543217", "Mother"), "B", 1),
]

# (category, subcategory, description, amount, payment method, vendor, wing)
_EXPENSES = [
    ("provisions", "groceries", "Monthly grocery supplies", 25000,
     ExpensePaymentMethod.CASH, "Local Grocery Store", "common"),
    ("maintenance", "plumbing", "Water pump repair", 5000,
     ExpensePaymentMethod.BANK_TRANSFER, "ABC Plumbing Services", "A"),
    ("utilities", "electricity", "Monthly electricity bill", 15000,
     ExpensePaymentMethod.UPI, "State Electricity Board", "common"),
    ("cleaning", "supplies", "Cleaning supplies and equipment", 3000,
     ExpensePaymentMethod.CASH, "CleanPro Supplies", "common"),
]


class DatabaseSeedService(BaseService[User, UserRepository]):
    """Idempotent demo data loader."""

    def __init__(self, db_session: Session, clock: Callable = today_utc):
        super().__init__(UserRepository(db_session), db_session)
        self.rooms = RoomRepository(db_session)
        self.tenants = TenantRepository(db_session)
        self.payments = RentPaymentRepository(db_session)
        self.expenses = ExpenseRepository(db_session)
        self._clock = clock

    def has_data(self) -> bool:
        return any(repo.count() > 0 for repo in (self.repository, self.rooms, self.tenants))

    def seed(self) -> ServiceResult[None]:
        """Load the demo data set in a single transaction unless data exists."""
        try:
            if self.has_data():
                return ServiceResult.success(message=ALREADY_SEEDED_MESSAGE)

            today = self._clock()
            with self.transaction():
                self.repository.create(
                    User(
                        name="Admin User",
                        email=ADMIN_EMAIL,
                        password_hash=hash_password(ADMIN_PASSWORD),
                        role=UserRole.ADMIN,
                        is_active=True,
                    ),
                    commit=False,
                )
                rooms = self._seed_rooms()
                tenants = self._seed_tenants(rooms)
                self._seed_payments(tenants, today)
                self._seed_expenses(today)

            self._log_operation("seed database", extra={"rooms": len(rooms), "tenants": len(tenants)})
            return ServiceResult.success(message=SEEDED_MESSAGE)
        except Exception as e:
            return self._handle_exception(e, "initialize database")

    def _seed_rooms(self) -> List[Room]:
        rooms = [
            Room(
                room_number=number,
                floor=floor,
                wing=wing,
                type=room_type,
                rent=rent,
                status=RoomStatus.AVAILABLE,
                amenities=amenities,
                description=description,
            )
            for number, floor, wing, room_type, rent, amenities, description in _ROOMS
        ]
        return self.rooms.create_many(rooms, commit=False)

    def _seed_tenants(self, rooms: List[Room]) -> List[Tenant]:
        tenants = []
        for room_index, name, email, phone, rent, deposit, joined, contact, wing, floor in _TENANTS:
            contact_name, contact_phone, relation = contact
            tenant = self.tenants.create(
                Tenant(
                    name=name,
                    email=email,
                    phone=phone,
                    room_id=rooms[room_index].id,
                    rent=rent,
                    deposit=deposit,
                    status=TenantStatus.ACTIVE,
                    join_date=joined,
                    emergency_contact={
                        "name": contact_name,
                        "phone": contact_phone,
                        "relation": relation,
                    },
                    wing=wing,
                    floor=floor,
                ),
                commit=False,
            )
            self.rooms.mark_occupied(rooms[room_index].id, tenant.id, commit=False)
            tenants.append(tenant)
        return tenants

    def _seed_payments(self, tenants: List[Tenant], today: date) -> None:
        billing = parse_month_token(current_month_token(today))
        due_date = billing.due_date()

        payments = []
        for index, tenant in enumerate(tenants):
            fully_paid = index == 0
            paid_amount = tenant.rent if fully_paid else 0
            payments.append(
                RentPayment(
                    tenant_id=tenant.id,
                    room_id=tenant.room_id,
                    month=billing.token,
                    year=billing.year,
                    month_name=billing.month_name,
                    amount=tenant.rent,
                    paid_amount=paid_amount,
                    late_fee=750 if index == 2 else 0,
                    due_date=due_date,
                    paid_date=billing.due_date(3) if fully_paid else None,
                    payment_method=PaymentMethod.UPI if fully_paid else None,
                    transaction_id="UPI123456789" if fully_paid else None,
                    status=classify_payment_status(tenant.rent, paid_amount, due_date, today),
                    wing=tenant.wing,
                )
            )
        self.payments.create_many(payments, commit=False)

    def _seed_expenses(self, today: date) -> None:
        self.expenses.create_many(
            [
                Expense(
                    category=category,
                    subcategory=subcategory,
                    description=description,
                    amount=amount,
                    date=today,
                    payment_method=method,
                    vendor=vendor,
                    status=ExpenseStatus.PAID,
                    wing=wing,
                )
                for category, subcategory, description, amount, method, vendor, wing in _EXPENSES
            ],
            commit=False,
        )

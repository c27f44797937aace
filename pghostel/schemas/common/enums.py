"""
All enumeration types used across the application.

These enums represent the core domain concepts for the PG hostel
(rooms, tenants, rent payments, expenses, users).
"""

from enum import Enum

__all__ = [
    "Wing",
    "RoomType",
    "RoomStatus",
    "TenantStatus",
    "IDProofType",
    "PaymentStatus",
    "PaymentMethod",
    "ExpensePaymentMethod",
    "ExpenseStatus",
    "UserRole",
]


class Wing(str, Enum):
    """Building section used to partition rooms and tenants."""

    A = "A"
    B = "B"


class RoomType(str, Enum):
    """Room occupancy type."""

    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"


class RoomStatus(str, Enum):
    """Room status enumeration."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class TenantStatus(str, Enum):
    """Tenant status enumeration."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class IDProofType(str, Enum):
    """ID proof type."""

    AADHAR = "aadhar"
    PASSPORT = "passport"
    PANCARD = "pancard"
    OTHER = "other"


class PaymentStatus(str, Enum):
    """Rent payment status, always derived from amounts and due date."""

    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    PARTIAL = "partial"


class PaymentMethod(str, Enum):
    """Rent payment method."""

    CASH = "cash"
    UPI = "upi"
    BANK_TRANSFER = "bank_transfer"
    CHEQUE = "cheque"


class ExpensePaymentMethod(str, Enum):
    """Expense payment method."""

    CASH = "cash"
    UPI = "upi"
    BANK_TRANSFER = "bank_transfer"


class ExpenseStatus(str, Enum):
    """Expense settlement status."""

    PENDING = "pending"
    PAID = "paid"


class UserRole(str, Enum):
    """User roles."""

    ADMIN = "admin"
    USER = "user"

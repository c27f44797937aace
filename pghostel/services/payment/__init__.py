"""
Rent payment services.
"""

from pghostel.services.payment.monthly_generator import MonthlyPaymentGenerator
from pghostel.services.payment.payment_stats import PaymentStatsService
from pghostel.services.payment.rent_payment_service import RentPaymentService
from pghostel.services.payment.status_classifier import classify_payment_status

__all__ = [
    "MonthlyPaymentGenerator",
    "PaymentStatsService",
    "RentPaymentService",
    "classify_payment_status",
]

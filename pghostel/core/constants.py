"""
Core application constants.

These values centralize business constants such as the rent due day, the
listing sentinel and the facility settings seeded on first start.
"""

from typing import Any, Dict

# API prefixes
API_PREFIX: str = "/api"

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"

# Rent
RENT_DUE_DAY: int = 5
DEFAULT_WING: str = "A"
MONTH_TOKEN_FORMAT_MESSAGE: str = "month is required in YYYY-MM format"

# Query filter value that disables a filter
FILTER_ALL: str = "all"

# Facility settings seeded when no record exists
DEFAULT_FACILITY_SETTINGS: Dict[str, Any] = {
    "pg_name": "Sunflower PG",
    "address": "123 Main Street, Bangalore, Karnataka 560001",
    "contact_number": "+91 9876543210",
    "email": "info@sunflowerpg.com",
    "gst_number": "29ABCDE1234F1Z5",
    "bank_details": {
        "account_number": "1234567890",
        "ifsc_code": "SBIN0001234",
        "bank_name": "State Bank of India",
        "account_holder_name": "Sunflower PG",
    },
    "rent_due_date": RENT_DUE_DAY,
    "late_fee_percentage": 5,
    "maintenance_fee": 0,
    "amenities": ["Wi-Fi", "AC", "Food", "Laundry", "Security", "Parking"],
    "policies": ["No smoking", "No pets", "Quiet hours after 10 PM"],
    "theme": {
        "primary_color": "#fbbf24",
        "secondary_color": "#92400e",
    },
    "notifications": {
        "email": True,
        "sms": False,
        "push": False,
    },
}

"""
PG hostel management backend.

Rooms, tenants, monthly rent, expenses, contact inquiries and facility
settings behind a FastAPI JSON API.
"""

__version__ = "1.0.0"

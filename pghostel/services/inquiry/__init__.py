"""
Inquiry services.
"""

from pghostel.services.inquiry.contact_service import ContactService

__all__ = ["ContactService"]

"""
Tenant services.
"""

from pghostel.services.tenant.tenant_service import TenantService

__all__ = ["TenantService"]

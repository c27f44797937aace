"""
Tenant endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from pghostel.api import deps
from pghostel.api.responses import envelope, envelope_list, message_only
from pghostel.schemas.common.response import ApiResponse
from pghostel.schemas.tenant import TenantCreate, TenantResponse, TenantUpdate
from pghostel.services.tenant import TenantService

router = APIRouter(prefix="/tenants", tags=["Tenants"])


@router.get("", response_model=ApiResponse[List[TenantResponse]])
def list_tenants(service: TenantService = Depends(deps.get_tenant_service)):
    return envelope_list(service.list_tenants(), TenantResponse)


@router.post("", response_model=ApiResponse[TenantResponse])
def create_tenant(payload: TenantCreate, service: TenantService = Depends(deps.get_tenant_service)):
    """Register a tenant and mark the referenced room occupied."""
    return envelope(service.create_tenant(payload), TenantResponse)


@router.put("/{tenant_id}", response_model=ApiResponse[TenantResponse])
def update_tenant(
    tenant_id: str,
    payload: TenantUpdate,
    service: TenantService = Depends(deps.get_tenant_service),
):
    return envelope(service.update_tenant(tenant_id, payload), TenantResponse)


@router.delete("/{tenant_id}", response_model=ApiResponse[None])
def delete_tenant(tenant_id: str, service: TenantService = Depends(deps.get_tenant_service)):
    return message_only(service.delete(tenant_id), "Tenant deleted successfully")

"""
Contact form endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from pghostel.api import deps
from pghostel.api.responses import envelope, envelope_list
from pghostel.schemas.common.response import ApiResponse
from pghostel.schemas.contact import ContactMessageCreate, ContactMessageResponse
from pghostel.services.inquiry import ContactService

router = APIRouter(prefix="/contacts", tags=["Contacts"])


@router.get("", response_model=ApiResponse[List[ContactMessageResponse]])
def list_messages(service: ContactService = Depends(deps.get_contact_service)):
    """Newest messages first, capped at CONTACT_LIST_LIMIT."""
    return envelope_list(service.list_messages(), ContactMessageResponse)


@router.post("", response_model=ApiResponse[ContactMessageResponse])
def submit_message(
    payload: ContactMessageCreate,
    service: ContactService = Depends(deps.get_contact_service),
):
    return envelope(service.submit(payload), ContactMessageResponse)


@router.put("/{message_id}/read", response_model=ApiResponse[ContactMessageResponse])
def mark_read(message_id: str, service: ContactService = Depends(deps.get_contact_service)):
    return envelope(service.mark_read(message_id), ContactMessageResponse)

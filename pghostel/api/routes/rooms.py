"""
Room endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from pghostel.api import deps
from pghostel.api.responses import envelope, envelope_list, message_only
from pghostel.schemas.common.response import ApiResponse
from pghostel.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from pghostel.services.hostel import RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("", response_model=ApiResponse[List[RoomResponse]])
def list_rooms(service: RoomService = Depends(deps.get_room_service)):
    """All rooms, each with its occupying tenant (null when none or deleted)."""
    return envelope_list(service.list_rooms(), RoomResponse)


@router.post("", response_model=ApiResponse[RoomResponse])
def create_room(payload: RoomCreate, service: RoomService = Depends(deps.get_room_service)):
    return envelope(service.create_room(payload), RoomResponse)


@router.put("/{room_id}", response_model=ApiResponse[RoomResponse])
def update_room(
    room_id: str,
    payload: RoomUpdate,
    service: RoomService = Depends(deps.get_room_service),
):
    return envelope(service.update_room(room_id, payload), RoomResponse)


@router.delete("/{room_id}", response_model=ApiResponse[None])
def delete_room(room_id: str, service: RoomService = Depends(deps.get_room_service)):
    return message_only(service.delete(room_id), "Room deleted successfully")

"""Rooms router - the room board and room-level transitions."""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.core.database import get_db
from frontdesk.core.deps import get_front_desk
from frontdesk.models.enums import RoomStatus
from frontdesk.schemas.base import ActorRequest
from frontdesk.schemas.room import RoomResponse, WorkflowResponse
from frontdesk.schemas.stay import CleaningConfirm
from frontdesk.services.front_desk import FrontDesk
from frontdesk.services.room_registry import Room
from frontdesk.services.staff import StaffService

router = APIRouter(prefix="/rooms", tags=["rooms"])


def room_response(desk: FrontDesk, room: Room) -> RoomResponse:
    return RoomResponse(
        **asdict(room),
        guest_name=desk.lifecycle.guest_label(room.id),
        ringing=desk.lifecycle.is_ringing(room.id),
    )


@router.get("", response_model=List[RoomResponse])
async def list_rooms(
    status: Optional[RoomStatus] = None,
    desk: FrontDesk = Depends(get_front_desk),
):
    """List rooms in number order, optionally filtered by status."""
    return [room_response(desk, r) for r in desk.registry.list(status=status)]


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(room_id: int, desk: FrontDesk = Depends(get_front_desk)):
    return room_response(desk, desk.registry.get(room_id))


@router.get("/{room_id}/workflow", response_model=WorkflowResponse)
async def get_room_workflow(room_id: int, desk: FrontDesk = Depends(get_front_desk)):
    """Workflow a selection of this room opens."""
    room = desk.registry.get(room_id)
    return WorkflowResponse(
        room_id=room.id,
        status=room.status,
        ringing=desk.lifecycle.is_ringing(room.id),
        workflow=desk.lifecycle.route_selection(room.id),
    )


@router.post("/{room_id}/clean", response_model=RoomResponse)
async def confirm_cleaning(
    room_id: int,
    data: CleaningConfirm,
    db: AsyncSession = Depends(get_db),
    desk: FrontDesk = Depends(get_front_desk),
):
    """Confirm a dirty room was cleaned by the selected housekeeper."""
    housekeeper = await StaffService(db).housekeeper(data.housekeeper_id)
    room = desk.lifecycle.confirm_cleaning(room_id, housekeeper.name if housekeeper else None)
    return room_response(desk, room)


@router.post("/{room_id}/resolve-maintenance", response_model=RoomResponse)
async def resolve_room_maintenance(
    room_id: int,
    data: ActorRequest,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Close the room's active ticket (if any) and send it to cleaning."""
    room = desk.lifecycle.resolve_maintenance(room_id, data.actor)
    return room_response(desk, room)


@router.post("/{room_id}/unblock", response_model=RoomResponse)
async def unblock_room(
    room_id: int,
    data: ActorRequest,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Return a blocked room to service. Disabled unless ALLOW_UNBLOCK is set."""
    room = desk.lifecycle.unblock(room_id, data.actor)
    return room_response(desk, room)

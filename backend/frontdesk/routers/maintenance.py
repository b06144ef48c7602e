"""Maintenance router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from frontdesk.core.deps import get_front_desk
from frontdesk.models.enums import TicketStatus
from frontdesk.schemas.base import ActorRequest
from frontdesk.schemas.maintenance import TicketCreate, TicketResponse, TicketStats
from frontdesk.services.front_desk import FrontDesk

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
async def create_ticket(data: TicketCreate, desk: FrontDesk = Depends(get_front_desk)):
    """Open a ticket. The room goes to maintenance unless it is blocked."""
    ticket = desk.lifecycle.create_ticket(data.room_number, data.issue, data.priority, data.actor)
    return TicketResponse.model_validate(ticket)


@router.get("", response_model=List[TicketResponse])
async def list_tickets(
    status: Optional[TicketStatus] = None,
    desk: FrontDesk = Depends(get_front_desk),
):
    """List tickets, newest first."""
    return [TicketResponse.model_validate(t) for t in desk.tickets.list(status=status)]


@router.get("/stats", response_model=TicketStats)
async def ticket_stats(desk: FrontDesk = Depends(get_front_desk)):
    return TicketStats(**desk.tickets.stats())


@router.get("/{ticket_id}", response_model=TicketResponse)
async def get_ticket(ticket_id: str, desk: FrontDesk = Depends(get_front_desk)):
    return TicketResponse.model_validate(desk.tickets.get(ticket_id))


@router.post("/{ticket_id}/resolve", response_model=TicketResponse)
async def resolve_ticket(
    ticket_id: str,
    data: ActorRequest,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Mark a ticket done. The bound room goes to cleaning when it can."""
    ticket = desk.lifecycle.resolve_ticket(ticket_id, data.actor)
    return TicketResponse.model_validate(ticket)

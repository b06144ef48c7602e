"""Maintenance ticket schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from frontdesk.schemas.base import BaseSchema
from frontdesk.models.enums import TicketPriority, TicketStatus


class TicketCreate(BaseSchema):
    """Open a maintenance ticket for a room number."""

    room_number: str = Field(..., min_length=1, max_length=20)
    issue: str = Field(..., min_length=1)
    priority: TicketPriority = TicketPriority.MEDIUM
    actor: Optional[str] = None


class TicketResponse(BaseSchema):
    """Maintenance ticket response."""

    id: str
    room_id: Optional[int] = None
    room_number: str
    issue: str
    priority: TicketPriority
    status: TicketStatus
    created_at: datetime
    resolved_at: Optional[datetime] = None


class TicketStats(BaseSchema):
    pending: int
    in_progress: int
    done: int
    total: int

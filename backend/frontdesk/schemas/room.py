"""Room schemas."""

from decimal import Decimal
from typing import Optional

from frontdesk.schemas.base import BaseSchema
from frontdesk.models.enums import BedLayout, RoomCategory, RoomStatus, Workflow


class RoomResponse(BaseSchema):
    """Room board entry."""

    id: int
    number: str
    category: RoomCategory
    bed_layout: BedLayout
    floor: str
    base_price: Decimal
    status: RoomStatus
    guest_name: Optional[str] = None
    ringing: bool = False


class WorkflowResponse(BaseSchema):
    """Workflow opened when a room is selected."""

    room_id: int
    status: RoomStatus
    ringing: bool
    workflow: Workflow

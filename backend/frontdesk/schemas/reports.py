"""Report schemas."""

from datetime import datetime
from decimal import Decimal

from frontdesk.schemas.base import BaseSchema
from frontdesk.models.enums import ActivityType


class OccupancyReport(BaseSchema):
    """Room counts per status."""

    total_rooms: int
    available: int
    occupied: int
    dirty: int
    maintenance: int
    blocked: int
    occupancy_rate: float


class ActivityEntryResponse(BaseSchema):
    id: str
    type: ActivityType
    action: str
    description: str
    actor: str
    timestamp: datetime


class FinancialReport(BaseSchema):
    """Ledger totals, optionally since a point in time."""

    income: Decimal
    expense: Decimal
    net: Decimal
    transaction_count: int
    outstanding_balance: Decimal

"""Reports router - occupancy, maintenance, activity and financial reporting."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from frontdesk.core.deps import get_front_desk
from frontdesk.models.enums import ActivityType, RoomStatus
from frontdesk.schemas.maintenance import TicketStats
from frontdesk.schemas.reports import ActivityEntryResponse, FinancialReport, OccupancyReport
from frontdesk.services.front_desk import FrontDesk
from frontdesk.services.stay_ledger import compute_totals

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/occupancy", response_model=OccupancyReport)
async def occupancy_report(desk: FrontDesk = Depends(get_front_desk)):
    """Room counts per status and the occupancy rate (occupied / total)."""
    rooms = desk.registry.list()
    counts = {s: 0 for s in RoomStatus}
    for room in rooms:
        counts[room.status] += 1

    total = len(rooms)
    occupancy_rate = (counts[RoomStatus.OCCUPIED] / total * 100) if total > 0 else 0

    return OccupancyReport(
        total_rooms=total,
        available=counts[RoomStatus.AVAILABLE],
        occupied=counts[RoomStatus.OCCUPIED],
        dirty=counts[RoomStatus.DIRTY],
        maintenance=counts[RoomStatus.MAINTENANCE],
        blocked=counts[RoomStatus.BLOCKED],
        occupancy_rate=round(occupancy_rate, 1),
    )


@router.get("/maintenance", response_model=TicketStats)
async def maintenance_report(desk: FrontDesk = Depends(get_front_desk)):
    return TicketStats(**desk.tickets.stats())


@router.get("/activity", response_model=List[ActivityEntryResponse])
async def activity_report(
    type: Optional[ActivityType] = None,
    limit: int = Query(100, ge=1, le=1000),
    desk: FrontDesk = Depends(get_front_desk),
):
    """Activity log, newest first."""
    return [ActivityEntryResponse.model_validate(e) for e in desk.activity.list(type=type, limit=limit)]


@router.get("/financial", response_model=FinancialReport)
async def financial_report(
    since: Optional[datetime] = None,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Ledger totals plus what active stays still owe."""
    totals = desk.transactions.totals(since=since)
    outstanding = sum(
        (compute_totals(s).balance for s in desk.stays.list()),
        Decimal("0"),
    )
    return FinancialReport(
        income=totals["income"],
        expense=totals["expense"],
        net=totals["net"],
        transaction_count=len(desk.transactions.list(since=since)),
        outstanding_balance=outstanding,
    )

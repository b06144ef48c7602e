"""Cashier router - shift open/close and manual entries."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.core.database import get_db
from frontdesk.core.deps import get_front_desk
from frontdesk.schemas.cashier import (
    EntryCreate,
    ShiftClose,
    ShiftOpen,
    ShiftReportResponse,
    ShiftResponse,
    ShiftTotalsResponse,
    TransactionResponse,
)
from frontdesk.services.front_desk import FrontDesk
from frontdesk.services.staff import StaffService

router = APIRouter(prefix="/cashier", tags=["cashier"])


def shift_response(desk: FrontDesk) -> ShiftResponse:
    session = desk.cashier.session
    return ShiftResponse(
        is_open=session.is_open,
        operator=session.operator,
        starting_float=session.starting_float,
        label=session.label,
        started_at=session.started_at,
        suggested_label=desk.cashier.suggested_label(),
    )


@router.get("/shift", response_model=ShiftResponse)
async def get_shift(desk: FrontDesk = Depends(get_front_desk)):
    return shift_response(desk)


@router.post("/shift/open", response_model=ShiftResponse, status_code=status.HTTP_201_CREATED)
async def open_shift(
    data: ShiftOpen,
    db: AsyncSession = Depends(get_db),
    desk: FrontDesk = Depends(get_front_desk),
):
    """Open a shift for an active operator."""
    operator = await StaffService(db).operator(data.operator_id)
    desk.cashier.open_shift(operator.name, data.starting_float, data.shift_label)
    return shift_response(desk)


@router.post("/entries", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def record_entry(data: EntryCreate, desk: FrontDesk = Depends(get_front_desk)):
    """Manual income or expense. Needs an open shift."""
    entry = desk.cashier.record_entry(
        data.kind,
        data.amount,
        data.description,
        data.category,
        data.payment_method,
    )
    return TransactionResponse.model_validate(entry)


@router.get("/totals", response_model=ShiftTotalsResponse)
async def shift_totals(desk: FrontDesk = Depends(get_front_desk)):
    return ShiftTotalsResponse.model_validate(desk.cashier.system_totals())


@router.post("/shift/close", response_model=ShiftReportResponse)
async def close_shift(data: ShiftClose, desk: FrontDesk = Depends(get_front_desk)):
    """Reconcile the physical count and close the shift."""
    report = desk.cashier.close_shift(data.physical_count(), data.observations)
    return ShiftReportResponse(
        operator=report.operator,
        label=report.label,
        started_at=report.started_at,
        closed_at=report.closed_at,
        starting_float=report.starting_float,
        system=ShiftTotalsResponse.model_validate(report.system),
        counted=report.counted,
        differences=report.differences,
        total_difference=report.total_difference,
        observations=report.observations,
        transactions=[TransactionResponse.model_validate(t) for t in report.transactions],
    )


@router.get("/transactions", response_model=List[TransactionResponse])
async def list_transactions(
    shift_only: bool = False,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Ledger entries, newest first. shift_only limits them to the open shift."""
    entries = desk.cashier.shift_transactions() if shift_only else desk.transactions.list()
    return [TransactionResponse.model_validate(t) for t in entries]

"""Stays router - check-in, billing, checkout and wake calls."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.core.database import get_db
from frontdesk.core.deps import get_front_desk
from frontdesk.schemas.base import ActorRequest
from frontdesk.schemas.stay import (
    CheckInRequest,
    CheckoutResponse,
    ConsumptionCreate,
    ConsumptionItemResponse,
    ContractFields,
    ContractUpdate,
    PaymentCreate,
    PaymentResponse,
    StayResponse,
    StayTotalsResponse,
)
from frontdesk.services.catalog import CatalogService
from frontdesk.services.front_desk import FrontDesk
from frontdesk.services.stay_ledger import Stay, compute_totals

router = APIRouter(prefix="/stays", tags=["stays"])


def stay_response(desk: FrontDesk, stay: Stay) -> StayResponse:
    contract = stay.contract
    return StayResponse(
        **{name: getattr(contract, name) for name in ContractFields.model_fields},
        room_id=stay.room_id,
        room_number=stay.room_number,
        daily_rate=contract.daily_rate,
        opened_at=stay.opened_at,
        consumption=[ConsumptionItemResponse.model_validate(i) for i in stay.consumption],
        payments=[PaymentResponse.model_validate(p) for p in stay.payments],
        totals=StayTotalsResponse.model_validate(compute_totals(stay)),
        ringing=desk.lifecycle.is_ringing(stay.room_id),
    )


@router.get("", response_model=List[StayResponse])
async def list_stays(desk: FrontDesk = Depends(get_front_desk)):
    """List active stays."""
    return [stay_response(desk, s) for s in desk.stays.list()]


@router.get("/wake-calls/ringing", response_model=List[int])
async def list_ringing(desk: FrontDesk = Depends(get_front_desk)):
    """Room ids whose wake-up call is ringing."""
    return sorted(desk.lifecycle.ringing)


@router.post("/{room_id}/check-in", response_model=StayResponse, status_code=status.HTTP_201_CREATED)
async def check_in(
    room_id: int,
    data: CheckInRequest,
    db: AsyncSession = Depends(get_db),
    desk: FrontDesk = Depends(get_front_desk),
):
    """Check a guest into an available room."""
    room = desk.registry.get(room_id)
    daily_rate = data.daily_rate
    if daily_rate is None:
        daily_rate = await CatalogService(db).daily_rate_for(room.category, desk.registry)

    stay = desk.lifecycle.check_in(room.id, data.to_contract(daily_rate), data.actor)
    return stay_response(desk, stay)


@router.get("/{room_id}", response_model=StayResponse)
async def get_stay(room_id: int, desk: FrontDesk = Depends(get_front_desk)):
    """Active stay for a room, with totals recomputed."""
    return stay_response(desk, desk.stays.get(room_id))


@router.patch("/{room_id}", response_model=StayResponse)
async def update_stay(
    room_id: int,
    data: ContractUpdate,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Edit the contract of an active stay."""
    stay = desk.lifecycle.update_stay(room_id, data.model_dump(exclude_unset=True))
    return stay_response(desk, stay)


@router.post("/{room_id}/consumption", response_model=StayResponse, status_code=status.HTTP_201_CREATED)
async def add_consumption(
    room_id: int,
    data: ConsumptionCreate,
    desk: FrontDesk = Depends(get_front_desk),
):
    desk.stays.add_consumption(room_id, data.item, data.unit_price, data.quantity)
    return stay_response(desk, desk.stays.get(room_id))


@router.post("/{room_id}/payments", response_model=StayResponse, status_code=status.HTTP_201_CREATED)
async def add_payment(
    room_id: int,
    data: PaymentCreate,
    desk: FrontDesk = Depends(get_front_desk),
):
    desk.stays.add_payment(room_id, data.amount, data.method)
    return stay_response(desk, desk.stays.get(room_id))


@router.post("/{room_id}/checkout", response_model=CheckoutResponse)
async def checkout(
    room_id: int,
    data: ActorRequest,
    desk: FrontDesk = Depends(get_front_desk),
):
    """Close the stay. Any balance sign is accepted."""
    totals = desk.lifecycle.checkout(room_id, data.actor)
    room = desk.registry.get(room_id)
    return CheckoutResponse(
        room_id=room.id,
        status=room.status,
        totals=StayTotalsResponse.model_validate(totals),
    )


@router.post("/{room_id}/wake-call/snooze", response_model=StayResponse)
async def snooze_wake_call(room_id: int, desk: FrontDesk = Depends(get_front_desk)):
    stay = desk.lifecycle.snooze(room_id)
    return stay_response(desk, stay)


@router.post("/{room_id}/wake-call/dismiss", response_model=StayResponse)
async def dismiss_wake_call(room_id: int, desk: FrontDesk = Depends(get_front_desk)):
    stay = desk.lifecycle.dismiss(room_id)
    return stay_response(desk, stay)

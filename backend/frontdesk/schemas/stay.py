"""Stay (check-in, billing, checkout) schemas."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from frontdesk.schemas.base import BaseSchema
from frontdesk.models.enums import DocumentType, PaymentMethod, RoomStatus
from frontdesk.services.stay_ledger import GuestContract


class ContractFields(BaseSchema):
    """Contract fields shared by check-in and responses."""

    guest_name: str
    document_type: DocumentType = DocumentType.CPF
    document: str
    phone: str = ""
    email: str = ""
    guests_count: int = Field(default=1, ge=1)
    vehicle_model: str = ""
    vehicle_color: str = ""
    vehicle_plate: str = ""
    check_in_date: date
    check_in_time: Optional[time] = None
    expected_checkout: date
    wake_up_enabled: bool = False
    wake_up_date: Optional[date] = None
    wake_up_call: Optional[time] = None
    notes: str = ""


class CheckInRequest(ContractFields):
    """Check-in form. Without a daily rate the configured category rate is used."""

    daily_rate: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    initial_payment: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)
    initial_payment_method: PaymentMethod = PaymentMethod.PIX
    actor: Optional[str] = None

    def to_contract(self, daily_rate: Decimal) -> GuestContract:
        data = self.model_dump(exclude={"actor", "daily_rate"})
        return GuestContract(daily_rate=daily_rate, **data)


class ContractUpdate(BaseSchema):
    """Edit an active stay. Only the fields sent are changed."""

    guest_name: Optional[str] = None
    document_type: Optional[DocumentType] = None
    document: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    guests_count: Optional[int] = Field(None, ge=1)
    vehicle_model: Optional[str] = None
    vehicle_color: Optional[str] = None
    vehicle_plate: Optional[str] = None
    check_in_date: Optional[date] = None
    check_in_time: Optional[time] = None
    expected_checkout: Optional[date] = None
    daily_rate: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    wake_up_enabled: Optional[bool] = None
    wake_up_date: Optional[date] = None
    wake_up_call: Optional[time] = None
    notes: Optional[str] = None


class ConsumptionCreate(BaseSchema):
    """Post a consumption line to a stay."""

    item: str
    unit_price: Decimal = Field(gt=0, decimal_places=2)
    quantity: int = 1


class PaymentCreate(BaseSchema):
    """Post a payment to a stay."""

    amount: Decimal = Field(gt=0, decimal_places=2)
    method: PaymentMethod = PaymentMethod.PIX


class ConsumptionItemResponse(BaseSchema):
    id: str
    item: str
    unit_price: Decimal
    quantity: int
    total_price: Decimal
    timestamp: datetime


class PaymentResponse(BaseSchema):
    id: str
    amount: Decimal
    method: PaymentMethod
    timestamp: datetime


class StayTotalsResponse(BaseSchema):
    nights: int
    room_total: Decimal
    consumption_total: Decimal
    paid_total: Decimal
    balance: Decimal


class StayResponse(ContractFields):
    """Active stay with derived totals."""

    room_id: int
    room_number: str
    daily_rate: Decimal
    opened_at: datetime
    consumption: list[ConsumptionItemResponse]
    payments: list[PaymentResponse]
    totals: StayTotalsResponse
    ringing: bool = False


class CheckoutResponse(BaseSchema):
    room_id: int
    status: RoomStatus
    totals: StayTotalsResponse


class CleaningConfirm(BaseSchema):
    """Cleaning confirmation. A housekeeper must be selected."""

    housekeeper_id: Optional[UUID] = None

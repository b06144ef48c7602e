"""Cashier shift schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from frontdesk.schemas.base import BaseSchema
from frontdesk.models.enums import PaymentMethod, TransactionCategory, TransactionKind


class ShiftOpen(BaseSchema):
    """Open a cash shift."""

    operator_id: UUID
    starting_float: Decimal = Field(default=Decimal("0"), ge=0)
    shift_label: Optional[str] = None


class ShiftResponse(BaseSchema):
    is_open: bool
    operator: Optional[str] = None
    starting_float: Decimal
    label: Optional[str] = None
    started_at: Optional[datetime] = None
    suggested_label: str


class EntryCreate(BaseSchema):
    """Manual income or expense entry."""

    kind: TransactionKind
    amount: Decimal
    description: str
    category: TransactionCategory = TransactionCategory.OTHER
    payment_method: Optional[PaymentMethod] = None


class TransactionResponse(BaseSchema):
    id: str
    description: str
    amount: Decimal
    kind: TransactionKind
    category: TransactionCategory
    payment_method: Optional[PaymentMethod] = None
    recorded_at: datetime


class ShiftTotalsResponse(BaseSchema):
    """System totals for the open shift."""

    cash: Decimal
    credit: Decimal
    debit: Decimal
    pix: Decimal
    expenses: Decimal
    balance: Decimal
    accommodation_total: Decimal
    consumption_total: Decimal


class ShiftClose(BaseSchema):
    """Physical count per payment method."""

    cash: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")
    debit: Decimal = Decimal("0")
    pix: Decimal = Decimal("0")
    observations: str = ""

    def physical_count(self) -> dict[str, Decimal]:
        return {
            PaymentMethod.CASH.value: self.cash,
            PaymentMethod.CREDIT.value: self.credit,
            PaymentMethod.DEBIT.value: self.debit,
            PaymentMethod.PIX.value: self.pix,
        }


class ShiftReportResponse(BaseSchema):
    """Reconciliation report returned on close."""

    operator: str
    label: str
    started_at: datetime
    closed_at: datetime
    starting_float: Decimal
    system: ShiftTotalsResponse
    counted: dict[str, Decimal]
    differences: dict[str, Decimal]
    total_difference: Decimal
    observations: str
    transactions: list[TransactionResponse]

"""Stay ledger: the financial record of each active stay.

Totals are derived on every read:

    nights           = ceil(|expected_checkout - check_in_date| in days), min 1
    room_total       = nights * daily_rate
    consumption_total = sum of line totals
    paid_total       = sum of payments
    balance          = room_total + consumption_total - paid_total

Balance is not clamped; a negative balance is an overpayment.
"""

import logging
import math
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, time
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Optional

from frontdesk.models.enums import (
    DocumentType,
    PaymentMethod,
    TransactionCategory,
    TransactionKind,
)
from frontdesk.services.errors import InvalidTransition, NotFound, ValidationFailed
from frontdesk.services.ledger import TransactionLedger

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
SECONDS_PER_DAY = 86400


def money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def require_cents(value: Decimal, label: str) -> None:
    if Decimal(value) != money(value):
        raise ValidationFailed(f"{label} cannot have fractions of a cent")


@dataclass
class GuestContract:
    """Check-in form data. Everything except the initial payment stays editable."""

    guest_name: str
    document: str
    check_in_date: date
    expected_checkout: date
    daily_rate: Decimal
    document_type: DocumentType = DocumentType.CPF
    check_in_time: Optional[time] = None
    phone: str = ""
    email: str = ""
    guests_count: int = 1
    vehicle_model: str = ""
    vehicle_color: str = ""
    vehicle_plate: str = ""
    wake_up_enabled: bool = False
    wake_up_date: Optional[date] = None
    wake_up_call: Optional[time] = None
    notes: str = ""
    initial_payment: Decimal = Decimal("0")
    initial_payment_method: PaymentMethod = PaymentMethod.PIX


EDITABLE_FIELDS = frozenset(
    f.name for f in fields(GuestContract)
    if f.name not in ("initial_payment", "initial_payment_method")
)

NULLABLE_FIELDS = frozenset({"check_in_time", "wake_up_date", "wake_up_call"})


@dataclass
class ConsumptionItem:
    id: str
    item: str
    unit_price: Decimal
    quantity: int
    total_price: Decimal
    timestamp: datetime


@dataclass
class PaymentEntry:
    id: str
    amount: Decimal
    method: PaymentMethod
    timestamp: datetime


@dataclass
class Stay:
    """Active stay for one room."""

    room_id: int
    room_number: str
    contract: GuestContract
    opened_at: datetime
    consumption: list[ConsumptionItem] = field(default_factory=list)
    payments: list[PaymentEntry] = field(default_factory=list)
    # Schedule value that last rang, so one schedule rings once
    wake_fired_for: Optional[datetime] = None

    @property
    def guest_name(self) -> str:
        return self.contract.guest_name

    @property
    def wake_schedule(self) -> Optional[datetime]:
        c = self.contract
        if not c.wake_up_enabled or c.wake_up_date is None or c.wake_up_call is None:
            return None
        return datetime.combine(c.wake_up_date, c.wake_up_call.replace(second=0, microsecond=0))


@dataclass(frozen=True)
class StayTotals:
    nights: int
    room_total: Decimal
    consumption_total: Decimal
    paid_total: Decimal
    balance: Decimal

    @property
    def revenue(self) -> Decimal:
        """Room plus consumption, before payments."""
        return self.room_total + self.consumption_total


def count_nights(check_in: date, checkout: date) -> int:
    """Billable nights, never less than one."""
    seconds = abs((checkout - check_in).total_seconds())
    return max(math.ceil(seconds / SECONDS_PER_DAY), 1)


def compute_totals(stay: Stay) -> StayTotals:
    """Pure computation over the stay's current fields."""
    c = stay.contract
    nights = count_nights(c.check_in_date, c.expected_checkout)
    room_total = money(nights * c.daily_rate)
    consumption_total = money(sum((i.total_price for i in stay.consumption), Decimal("0")))
    paid_total = money(sum((p.amount for p in stay.payments), Decimal("0")))
    return StayTotals(
        nights=nights,
        room_total=room_total,
        consumption_total=consumption_total,
        paid_total=paid_total,
        balance=room_total + consumption_total - paid_total,
    )


class StayRepository(ABC):
    """Storage interface for active stays, keyed by room id."""

    @abstractmethod
    def get(self, room_id: int) -> Optional[Stay]:
        pass

    @abstractmethod
    def put(self, stay: Stay) -> None:
        pass

    @abstractmethod
    def delete(self, room_id: int) -> None:
        pass

    @abstractmethod
    def list(self) -> list[Stay]:
        pass


class InMemoryStayRepository(StayRepository):
    def __init__(self):
        self._stays: dict[int, Stay] = {}

    def get(self, room_id: int) -> Optional[Stay]:
        return self._stays.get(room_id)

    def put(self, stay: Stay) -> None:
        self._stays[stay.room_id] = stay

    def delete(self, room_id: int) -> None:
        self._stays.pop(room_id, None)

    def list(self) -> list[Stay]:
        return list(self._stays.values())


class StayLedger:
    """Owns active stays. At most one stay per room."""

    def __init__(
        self,
        transactions: TransactionLedger,
        repository: Optional[StayRepository] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._repo = repository or InMemoryStayRepository()
        self._transactions = transactions
        self._clock = clock

    def find(self, room_id: int) -> Optional[Stay]:
        return self._repo.get(room_id)

    def get(self, room_id: int) -> Stay:
        stay = self._repo.get(room_id)
        if stay is None:
            raise NotFound(f"No active stay for room {room_id}")
        return stay

    def list(self) -> list[Stay]:
        return self._repo.list()

    def open_stay(self, room_id: int, room_number: str, contract: GuestContract) -> Stay:
        if self._repo.get(room_id) is not None:
            raise InvalidTransition(f"Room {room_number} already has an active stay")
        if contract.daily_rate < 0:
            raise ValidationFailed("Daily rate cannot be negative")
        if contract.initial_payment < 0:
            raise ValidationFailed("Initial payment cannot be negative")
        require_cents(contract.daily_rate, "Daily rate")
        require_cents(contract.initial_payment, "Initial payment")

        now = self._clock()
        stay = Stay(room_id=room_id, room_number=room_number, contract=contract, opened_at=now)

        if contract.initial_payment > 0:
            stay.payments.append(PaymentEntry(
                id=str(uuid.uuid4()),
                amount=contract.initial_payment,
                method=contract.initial_payment_method,
                timestamp=now,
            ))
            self._transactions.record(
                kind=TransactionKind.INCOME,
                amount=contract.initial_payment,
                description=f"Check-in advance - Room {room_number} ({contract.guest_name})",
                category=TransactionCategory.ACCOMMODATION,
                payment_method=contract.initial_payment_method,
            )

        self._repo.put(stay)
        return stay

    def add_consumption(
        self,
        room_id: int,
        item_name: str,
        unit_price: Decimal,
        quantity: int = 1,
    ) -> ConsumptionItem:
        stay = self.get(room_id)
        item_name = (item_name or "").strip()
        if not item_name:
            raise ValidationFailed("Item name is required")
        if unit_price <= 0:
            raise ValidationFailed("Unit price must be greater than zero")
        require_cents(unit_price, "Unit price")
        if quantity < 1:
            raise ValidationFailed("Quantity must be at least 1")

        line = ConsumptionItem(
            id=str(uuid.uuid4()),
            item=item_name,
            unit_price=unit_price,
            quantity=quantity,
            total_price=unit_price * quantity,
            timestamp=self._clock(),
        )
        stay.consumption.append(line)
        self._repo.put(stay)
        return line

    def add_payment(self, room_id: int, amount: Decimal, method: PaymentMethod) -> PaymentEntry:
        stay = self.get(room_id)
        if amount <= 0:
            raise ValidationFailed("Payment amount must be greater than zero")
        require_cents(amount, "Payment amount")

        entry = PaymentEntry(
            id=str(uuid.uuid4()),
            amount=amount,
            method=method,
            timestamp=self._clock(),
        )
        stay.payments.append(entry)
        self._repo.put(stay)

        self._transactions.record(
            kind=TransactionKind.INCOME,
            amount=amount,
            description=f"Payment - Room {stay.room_number} ({stay.guest_name})",
            category=TransactionCategory.ACCOMMODATION,
            payment_method=method,
        )
        return entry

    def update_contract(self, room_id: int, changes: dict[str, Any]) -> Stay:
        """Edit rate, dates, contact, vehicle, wake-call or notes of an active stay."""
        stay = self.get(room_id)
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationFailed(f"Fields not editable: {', '.join(sorted(unknown))}")
        missing = sorted(k for k, v in changes.items() if v is None and k not in NULLABLE_FIELDS)
        if missing:
            raise ValidationFailed(f"Fields cannot be empty: {', '.join(missing)}")
        if "guest_name" in changes and not (changes["guest_name"] or "").strip():
            raise ValidationFailed("Guest name is required")
        if "document" in changes and not (changes["document"] or "").strip():
            raise ValidationFailed("Guest document is required")
        if "daily_rate" in changes and changes["daily_rate"] < 0:
            raise ValidationFailed("Daily rate cannot be negative")
        if "daily_rate" in changes:
            require_cents(changes["daily_rate"], "Daily rate")

        stay.contract = replace(stay.contract, **changes)
        self._repo.put(stay)
        return stay

    def compute_totals(self, room_id: int) -> StayTotals:
        return compute_totals(self.get(room_id))

    def close_stay(self, room_id: int) -> StayTotals:
        """Compute final totals and drop the stay. Nothing is archived."""
        stay = self.get(room_id)
        totals = compute_totals(stay)
        self._repo.delete(room_id)
        return totals

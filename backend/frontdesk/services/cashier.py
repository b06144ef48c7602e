"""
Front Desk - Cashier Shift Service

One cash session at a time. Manual income/expense entries need an open
shift; stay payments write to the ledger directly and are not gated here.

Reconciliation at close:
    cash in drawer = starting float + cash income - expenses
    system balance = cash in drawer + credit + debit + pix
    diff per method = counted - system
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from frontdesk.models.enums import (
    CONSUMPTION_CATEGORIES,
    ActivityAction,
    ActivityType,
    PaymentMethod,
    TransactionCategory,
    TransactionKind,
)
from frontdesk.services.audit import ActivityLog
from frontdesk.services.errors import InvalidTransition, ValidationFailed
from frontdesk.services.ledger import Transaction, TransactionLedger
from frontdesk.services.stay_ledger import money

logger = logging.getLogger(__name__)

SHIFT_1 = "Shift 1 (07h - 15h)"
SHIFT_2 = "Shift 2 (15h - 23h)"
SHIFT_3 = "Shift 3 (23h - 07h)"

ZERO = Decimal("0")


def detect_shift_label(now: datetime) -> str:
    """Shift for a wall-clock time. The first half hour after a handover
    still belongs to the outgoing shift."""
    early = now.minute < 30
    hour = now.hour
    if 7 <= hour < 15:
        return SHIFT_3 if hour == 7 and early else SHIFT_1
    if 15 <= hour < 23:
        return SHIFT_1 if hour == 15 and early else SHIFT_2
    return SHIFT_2 if hour == 23 and early else SHIFT_3


@dataclass
class ShiftSession:
    is_open: bool = False
    operator: Optional[str] = None
    starting_float: Decimal = ZERO
    label: Optional[str] = None
    started_at: Optional[datetime] = None


@dataclass(frozen=True)
class ShiftTotals:
    cash: Decimal
    credit: Decimal
    debit: Decimal
    pix: Decimal
    expenses: Decimal
    balance: Decimal
    accommodation_total: Decimal
    consumption_total: Decimal

    def by_method(self) -> dict[str, Decimal]:
        return {
            PaymentMethod.CASH.value: self.cash,
            PaymentMethod.CREDIT.value: self.credit,
            PaymentMethod.DEBIT.value: self.debit,
            PaymentMethod.PIX.value: self.pix,
        }


@dataclass(frozen=True)
class ShiftReport:
    operator: str
    label: str
    started_at: datetime
    closed_at: datetime
    starting_float: Decimal
    system: ShiftTotals
    counted: dict[str, Decimal]
    differences: dict[str, Decimal]
    total_difference: Decimal
    observations: str
    transactions: list[Transaction] = field(default_factory=list)


class Cashier:
    """Shift open/close and manual cash entries."""

    def __init__(
        self,
        transactions: TransactionLedger,
        activity: ActivityLog,
        clock: Callable[[], datetime] = datetime.now,
        tolerance: Decimal = Decimal("10"),
    ):
        self._transactions = transactions
        self._activity = activity
        self._clock = clock
        self._tolerance = tolerance
        self._session = ShiftSession()

    @property
    def session(self) -> ShiftSession:
        return self._session

    def suggested_label(self) -> str:
        return detect_shift_label(self._clock())

    def open_shift(
        self,
        operator: str,
        starting_float: Decimal = ZERO,
        shift_label: Optional[str] = None,
    ) -> ShiftSession:
        if self._session.is_open:
            raise InvalidTransition(f"A shift is already open ({self._session.operator})")
        operator = (operator or "").strip()
        if not operator:
            raise ValidationFailed("Operator is required")
        if starting_float < 0:
            raise ValidationFailed("Starting float cannot be negative")

        now = self._clock()
        self._session = ShiftSession(
            is_open=True,
            operator=operator,
            starting_float=money(starting_float),
            label=shift_label or detect_shift_label(now),
            started_at=now,
        )
        self._activity.append(
            ActivityType.FINANCIAL,
            ActivityAction.SHIFT_OPENED,
            f"{self._session.label} opened with float {self._session.starting_float:.2f}",
            operator,
        )
        return self._session

    def record_entry(
        self,
        kind: TransactionKind,
        amount: Decimal,
        description: str,
        category: TransactionCategory,
        payment_method: Optional[PaymentMethod] = None,
    ) -> Transaction:
        """Manual cashier entry. Rejected while the shift is closed."""
        if not self._session.is_open:
            raise InvalidTransition("Open a shift before recording entries")
        if amount <= 0:
            raise ValidationFailed("Amount must be greater than zero")
        description = (description or "").strip()
        if not description:
            raise ValidationFailed("Description is required")

        entry = self._transactions.record(kind, money(amount), description, category, payment_method)
        action = (
            ActivityAction.INCOME_RECORDED if kind == TransactionKind.INCOME
            else ActivityAction.EXPENSE_RECORDED
        )
        self._activity.append(
            ActivityType.FINANCIAL,
            action,
            f"{description}: {entry.amount:.2f}",
            self._session.operator,
        )
        return entry

    def shift_transactions(self) -> list[Transaction]:
        if not self._session.is_open:
            return []
        return self._transactions.list(since=self._session.started_at)

    def system_totals(self) -> ShiftTotals:
        """Totals over the transactions recorded since the shift started."""
        income = {m: ZERO for m in PaymentMethod}
        expenses = ZERO
        accommodation = ZERO
        consumption = ZERO

        for t in self.shift_transactions():
            if t.kind == TransactionKind.EXPENSE:
                expenses += t.amount
                continue
            income[t.payment_method or PaymentMethod.CASH] += t.amount
            if t.category == TransactionCategory.ACCOMMODATION:
                accommodation += t.amount
            elif t.category in CONSUMPTION_CATEGORIES:
                consumption += t.amount

        cash_in_drawer = self._session.starting_float + income[PaymentMethod.CASH] - expenses
        credit = income[PaymentMethod.CREDIT]
        debit = income[PaymentMethod.DEBIT]
        pix = income[PaymentMethod.PIX]
        return ShiftTotals(
            cash=cash_in_drawer,
            credit=credit,
            debit=debit,
            pix=pix,
            expenses=expenses,
            balance=cash_in_drawer + credit + debit + pix,
            accommodation_total=accommodation,
            consumption_total=consumption,
        )

    def close_shift(self, physical_count: dict[str, Decimal], observations: str = "") -> ShiftReport:
        """Reconcile the counted drawer against the system and reset the session.

        A total difference above the tolerance needs observations.
        """
        if not self._session.is_open:
            raise InvalidTransition("No shift is open")

        system = self.system_totals()
        counted = {
            method: money(physical_count.get(method) or ZERO)
            for method in system.by_method()
        }
        differences = {
            method: counted[method] - expected
            for method, expected in system.by_method().items()
        }
        total_difference = sum(differences.values(), ZERO)
        observations = (observations or "").strip()

        if abs(total_difference) > self._tolerance and not observations:
            raise ValidationFailed(
                f"Difference of {total_difference:.2f} exceeds {self._tolerance:.2f}; observations are required"
            )

        session = self._session
        report = ShiftReport(
            operator=session.operator,
            label=session.label,
            started_at=session.started_at,
            closed_at=self._clock(),
            starting_float=session.starting_float,
            system=system,
            counted=counted,
            differences=differences,
            total_difference=total_difference,
            observations=observations,
            transactions=[t for t in self.shift_transactions() if t.kind == TransactionKind.INCOME],
        )
        self._activity.append(
            ActivityType.FINANCIAL,
            ActivityAction.SHIFT_CLOSED,
            f"{session.label} closed. Difference: {total_difference:.2f}",
            session.operator,
        )
        logger.info(f"[CASHIER] {session.label} closed by {session.operator} (diff {total_difference})")
        self._session = ShiftSession()
        return report

"""
Front Desk - Transactions Ledger

Financial log fed by stay payments and cashier entries.
Entries are append-only and held for the process lifetime.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from frontdesk.models.enums import PaymentMethod, TransactionCategory, TransactionKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transaction:
    id: str
    description: str
    amount: Decimal
    kind: TransactionKind
    category: TransactionCategory
    payment_method: Optional[PaymentMethod]
    recorded_at: datetime


class TransactionLedger:
    """
    Income/expense log.

    Writers:
    - Stay ledger (check-in advance, payments)
    - Cashier (manual entries while a shift is open)
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._entries: list[Transaction] = []

    def record(
        self,
        kind: TransactionKind,
        amount: Decimal,
        description: str,
        category: TransactionCategory,
        payment_method: Optional[PaymentMethod] = None,
    ) -> Transaction:
        """Append an entry. No shift check happens here."""
        entry = Transaction(
            id=str(uuid.uuid4()),
            description=description,
            amount=amount,
            kind=kind,
            category=category,
            payment_method=payment_method,
            recorded_at=self._clock(),
        )
        self._entries.append(entry)
        logger.info(f"[LEDGER] {kind.value} {amount} ({category.value}) - {description}")
        return entry

    def list(
        self,
        since: Optional[datetime] = None,
        kind: Optional[TransactionKind] = None,
    ) -> list[Transaction]:
        """Entries, newest first."""
        entries = self._entries
        if since is not None:
            entries = [e for e in entries if e.recorded_at >= since]
        if kind is not None:
            entries = [e for e in entries if e.kind == kind]
        return sorted(entries, key=lambda e: e.recorded_at, reverse=True)

    def totals(self, since: Optional[datetime] = None) -> dict[str, Decimal]:
        income = Decimal("0")
        expense = Decimal("0")
        for e in self.list(since=since):
            if e.kind == TransactionKind.INCOME:
                income += e.amount
            else:
                expense += e.amount
        return {"income": income, "expense": expense, "net": income - expense}

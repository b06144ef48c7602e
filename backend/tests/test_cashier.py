from datetime import datetime
from decimal import Decimal

import pytest

from frontdesk.models.enums import (
    ActivityAction,
    ActivityType,
    PaymentMethod,
    TransactionCategory,
    TransactionKind,
)
from frontdesk.services.cashier import SHIFT_1, SHIFT_2, SHIFT_3, detect_shift_label
from frontdesk.services.errors import InvalidTransition, ValidationFailed


@pytest.mark.parametrize(
    "hour, minute, label",
    [
        (7, 10, SHIFT_3),
        (7, 30, SHIFT_1),
        (12, 0, SHIFT_1),
        (15, 29, SHIFT_1),
        (15, 30, SHIFT_2),
        (22, 59, SHIFT_2),
        (23, 0, SHIFT_2),
        (23, 45, SHIFT_3),
        (3, 0, SHIFT_3),
    ],
)
def test_shift_label_detection(hour, minute, label):
    assert detect_shift_label(datetime(2026, 3, 10, hour, minute)) == label


def test_entries_need_an_open_shift(desk):
    with pytest.raises(InvalidTransition):
        desk.cashier.record_entry(
            TransactionKind.INCOME, Decimal("10"), "Snack", TransactionCategory.CONSUMPTION,
        )

    assert desk.transactions.list() == []


def test_open_shift_defaults_label_and_logs(desk):
    session = desk.cashier.open_shift("Paula", Decimal("100"))

    assert session.is_open
    assert session.label == SHIFT_1
    assert session.starting_float == Decimal("100.00")
    [entry] = desk.activity.list(type=ActivityType.FINANCIAL)
    assert entry.action == ActivityAction.SHIFT_OPENED.value
    assert entry.actor == "Paula"


def test_open_twice_is_rejected(desk):
    desk.cashier.open_shift("Paula", Decimal("100"))

    with pytest.raises(InvalidTransition):
        desk.cashier.open_shift("Rui", Decimal("0"))

    assert desk.cashier.session.operator == "Paula"


@pytest.mark.parametrize("operator, float_", [("", Decimal("0")), ("Paula", Decimal("-1"))])
def test_open_shift_validation(desk, operator, float_):
    with pytest.raises(ValidationFailed):
        desk.cashier.open_shift(operator, float_)

    assert not desk.cashier.session.is_open


def test_entry_validation(desk):
    desk.cashier.open_shift("Paula")

    with pytest.raises(ValidationFailed):
        desk.cashier.record_entry(TransactionKind.EXPENSE, Decimal("0"), "Ice", TransactionCategory.SUPPLIERS)
    with pytest.raises(ValidationFailed):
        desk.cashier.record_entry(TransactionKind.EXPENSE, Decimal("5"), " ", TransactionCategory.SUPPLIERS)


def test_system_totals(desk, contract, clock):
    # Before the shift: not counted
    desk.transactions.record(TransactionKind.INCOME, Decimal("999"), "Old", TransactionCategory.OTHER, PaymentMethod.CASH)
    clock.advance(minutes=1)

    desk.cashier.open_shift("Paula", Decimal("100"))
    desk.cashier.record_entry(TransactionKind.INCOME, Decimal("50"), "Bar tab", TransactionCategory.RESTAURANT, PaymentMethod.CASH)
    desk.cashier.record_entry(TransactionKind.INCOME, Decimal("30"), "Minibar", TransactionCategory.MINIBAR, PaymentMethod.CREDIT)
    desk.cashier.record_entry(TransactionKind.INCOME, Decimal("15"), "Parking", TransactionCategory.OTHER)
    desk.cashier.record_entry(TransactionKind.EXPENSE, Decimal("10"), "Ice", TransactionCategory.SUPPLIERS, PaymentMethod.CASH)
    desk.lifecycle.check_in(25, contract())
    desk.stays.add_payment(25, Decimal("20"), PaymentMethod.PIX)

    totals = desk.cashier.system_totals()

    assert totals.cash == Decimal("155")  # 100 + 50 + 15 - 10
    assert totals.credit == Decimal("30")
    assert totals.debit == Decimal("0")
    assert totals.pix == Decimal("20")
    assert totals.expenses == Decimal("10")
    assert totals.balance == Decimal("205")
    assert totals.accommodation_total == Decimal("20")
    assert totals.consumption_total == Decimal("80")


def test_close_with_matching_count(desk):
    desk.cashier.open_shift("Paula", Decimal("100"))
    desk.cashier.record_entry(TransactionKind.INCOME, Decimal("40"), "Soda", TransactionCategory.CONSUMPTION, PaymentMethod.DEBIT)

    report = desk.cashier.close_shift({"cash": Decimal("100"), "debit": Decimal("40")})

    assert report.total_difference == Decimal("0")
    assert report.differences == {"cash": 0, "credit": 0, "debit": 0, "pix": 0}
    assert [t.description for t in report.transactions] == ["Soda"]
    assert not desk.cashier.session.is_open
    assert desk.activity.list(type=ActivityType.FINANCIAL)[0].action == ActivityAction.SHIFT_CLOSED.value


def test_large_difference_needs_observations(desk):
    desk.cashier.open_shift("Paula", Decimal("100"))

    with pytest.raises(ValidationFailed):
        desk.cashier.close_shift({"cash": Decimal("80")})
    assert desk.cashier.session.is_open

    report = desk.cashier.close_shift({"cash": Decimal("80")}, "Change given twice")

    assert report.total_difference == Decimal("-20")
    assert report.differences["cash"] == Decimal("-20")
    assert report.observations == "Change given twice"
    assert not desk.cashier.session.is_open


def test_small_difference_closes_without_observations(desk):
    desk.cashier.open_shift("Paula", Decimal("100"))

    report = desk.cashier.close_shift({"cash": Decimal("110")})

    assert report.total_difference == Decimal("10")


def test_close_without_open_shift(desk):
    with pytest.raises(InvalidTransition):
        desk.cashier.close_shift({})


def test_stay_payments_are_not_gated_by_shift(desk, contract):
    desk.lifecycle.check_in(25, contract())

    desk.stays.add_payment(25, Decimal("50"), PaymentMethod.CASH)

    assert len(desk.transactions.list()) == 1

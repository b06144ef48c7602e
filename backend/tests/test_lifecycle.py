import random
from datetime import date
from decimal import Decimal

import pytest

from frontdesk.core.config import FloorConfig
from frontdesk.models.enums import (
    ActivityAction,
    ActivityType,
    PaymentMethod,
    RoomStatus,
    Workflow,
)
from frontdesk.services.errors import FrontDeskError, InvalidTransition, NotFound, ValidationFailed
from frontdesk.services.front_desk import FrontDesk
from frontdesk.services.lifecycle import route_for

from conftest import make_settings


def test_scenario_a_check_in_bill_and_checkout(desk, contract, check_board):
    desk.lifecycle.check_in(25, contract(guest_name="Ana", document="123", daily_rate=Decimal("250")))
    assert desk.registry.get(25).status == RoomStatus.OCCUPIED
    assert desk.stays.compute_totals(25).balance == Decimal("250.00")
    check_board(desk)

    desk.stays.add_consumption(25, "Água", Decimal("6.00"), 2)
    assert desk.stays.compute_totals(25).balance == Decimal("262.00")

    desk.stays.add_payment(25, Decimal("100.00"), PaymentMethod.CASH)
    assert desk.stays.compute_totals(25).balance == Decimal("162.00")

    desk.lifecycle.checkout(25)
    assert desk.registry.get(25).status == RoomStatus.DIRTY
    assert desk.stays.find(25) is None
    check_board(desk)


def test_check_in_sets_guest_label_and_logs(desk, contract):
    desk.lifecycle.check_in(25, contract(), actor="Reception")

    assert desk.lifecycle.guest_label(25) == "Ana"
    [entry] = desk.activity.list()
    assert entry.type == ActivityType.CHECK_IN
    assert entry.action == ActivityAction.CHECK_IN_COMPLETED.value
    assert entry.actor == "Reception"


@pytest.mark.parametrize(
    "overrides",
    [
        {"guest_name": ""},
        {"guest_name": "   "},
        {"document": ""},
    ],
)
def test_check_in_guard_failure_changes_nothing(desk, contract, overrides, check_board):
    with pytest.raises(ValidationFailed):
        desk.lifecycle.check_in(25, contract(**overrides))

    assert desk.registry.get(25).status == RoomStatus.AVAILABLE
    assert desk.stays.find(25) is None
    assert desk.activity.list() == []
    check_board(desk)


@pytest.mark.parametrize(
    "status",
    [RoomStatus.OCCUPIED, RoomStatus.DIRTY, RoomStatus.MAINTENANCE, RoomStatus.BLOCKED],
)
def test_check_in_requires_available_room(desk, contract, status):
    desk.registry.set_status(26, status)

    with pytest.raises(InvalidTransition):
        desk.lifecycle.check_in(26, contract())

    assert desk.stays.find(26) is None


def test_check_in_unknown_room(desk, contract):
    with pytest.raises(NotFound):
        desk.lifecycle.check_in(999, contract())


@pytest.mark.parametrize("paid", [Decimal("0"), Decimal("250"), Decimal("400")])
def test_checkout_accepts_any_balance_sign(desk, contract, paid, check_board):
    desk.lifecycle.check_in(25, contract())
    if paid:
        desk.stays.add_payment(25, paid, PaymentMethod.PIX)

    totals = desk.lifecycle.checkout(25)

    assert totals.balance == Decimal("250") - paid
    assert desk.registry.get(25).status == RoomStatus.DIRTY
    assert desk.stays.find(25) is None
    check_board(desk)


def test_checkout_logs_total_revenue(desk, contract):
    desk.lifecycle.check_in(25, contract())
    desk.stays.add_consumption(25, "Wine", Decimal("80"), 1)
    desk.stays.add_payment(25, Decimal("330"), PaymentMethod.CREDIT)

    desk.lifecycle.checkout(25)

    entry = desk.activity.list(type=ActivityType.CHECK_OUT)[0]
    assert "Ana" in entry.description
    assert "room 25" in entry.description
    assert "330.00" in entry.description


@pytest.mark.parametrize(
    "status",
    [RoomStatus.AVAILABLE, RoomStatus.DIRTY, RoomStatus.MAINTENANCE, RoomStatus.BLOCKED],
)
def test_checkout_requires_occupied_room(desk, status):
    desk.registry.set_status(27, status)

    with pytest.raises(InvalidTransition):
        desk.lifecycle.checkout(27)

    assert desk.registry.get(27).status == status


def test_scenario_c_cleaning_needs_a_housekeeper(desk, contract):
    desk.lifecycle.check_in(25, contract())
    desk.lifecycle.checkout(25)

    with pytest.raises(ValidationFailed):
        desk.lifecycle.confirm_cleaning(25, None)
    with pytest.raises(ValidationFailed):
        desk.lifecycle.confirm_cleaning(25, "  ")
    assert desk.registry.get(25).status == RoomStatus.DIRTY

    desk.lifecycle.confirm_cleaning(25, "Maria")

    assert desk.registry.get(25).status == RoomStatus.AVAILABLE
    entry = desk.activity.list(type=ActivityType.CLEANING)[0]
    assert entry.description == "Room 25 cleaned by Maria"


def test_cleaning_requires_dirty_room(desk):
    with pytest.raises(InvalidTransition):
        desk.lifecycle.confirm_cleaning(25, "Maria")


def test_resolve_maintenance_sends_room_to_cleaning(desk):
    ticket = desk.lifecycle.create_ticket("30", "Shower leaking")

    desk.lifecycle.resolve_maintenance(30, actor="Carlos")

    assert desk.registry.get(30).status == RoomStatus.DIRTY
    assert desk.tickets.get(ticket.id).resolved_at is not None


def test_resolve_maintenance_without_ticket(desk):
    desk.registry.set_status(31, RoomStatus.MAINTENANCE)

    desk.lifecycle.resolve_maintenance(31)

    assert desk.registry.get(31).status == RoomStatus.DIRTY
    assert desk.activity.list(type=ActivityType.MAINTENANCE)


def test_resolve_maintenance_requires_maintenance_room(desk):
    with pytest.raises(InvalidTransition):
        desk.lifecycle.resolve_maintenance(31)


def test_unblock_is_disabled_by_default(desk):
    desk.registry.set_status(44, RoomStatus.BLOCKED)

    with pytest.raises(InvalidTransition):
        desk.lifecycle.unblock(44)

    assert desk.registry.get(44).status == RoomStatus.BLOCKED


def test_unblock_when_enabled(clock):
    desk = FrontDesk.from_settings(make_settings(allow_unblock=True), clock=clock)
    desk.registry.set_status(44, RoomStatus.BLOCKED)

    desk.lifecycle.unblock(44, actor="Manager")

    assert desk.registry.get(44).status == RoomStatus.AVAILABLE
    [entry] = desk.activity.list(type=ActivityType.SYSTEM)
    assert entry.action == ActivityAction.ROOM_UNBLOCKED.value

    with pytest.raises(InvalidTransition):
        desk.lifecycle.unblock(44)


@pytest.mark.parametrize(
    "status, workflow",
    [
        (RoomStatus.AVAILABLE, Workflow.CHECK_IN),
        (RoomStatus.OCCUPIED, Workflow.STAY_DETAIL),
        (RoomStatus.DIRTY, Workflow.CLEANING),
        (RoomStatus.MAINTENANCE, Workflow.MAINTENANCE_RESOLUTION),
        (RoomStatus.BLOCKED, Workflow.BLOCKED_NOTICE),
    ],
)
def test_selection_routing(status, workflow):
    assert route_for(status) == workflow
    assert route_for(status, ringing=True) == Workflow.ALARM


def test_route_selection_reads_room_status(desk, contract):
    assert desk.lifecycle.route_selection(25) == Workflow.CHECK_IN
    desk.lifecycle.check_in(25, contract())
    assert desk.lifecycle.route_selection(25) == Workflow.STAY_DETAIL


def test_random_operation_sequences_keep_board_consistent(clock, contract, check_board):
    floors = [FloorConfig(name="test", first_number=1, last_number=8, category="standard", base_price=Decimal("100"))]
    desk = FrontDesk.from_settings(make_settings(floor_table=floors, allow_unblock=True), clock=clock)
    rng = random.Random(7)

    for step in range(500):
        room_id = rng.randint(1, 8)
        action = rng.choice(["check_in", "checkout", "clean", "ticket", "resolve", "unblock", "pay"])
        try:
            if action == "check_in":
                desk.lifecycle.check_in(room_id, contract(guest_name=f"Guest {step}", daily_rate=Decimal("100")))
            elif action == "checkout":
                desk.lifecycle.checkout(room_id)
            elif action == "clean":
                desk.lifecycle.confirm_cleaning(room_id, "Maria")
            elif action == "ticket":
                desk.lifecycle.create_ticket(str(room_id), "Broken lamp")
            elif action == "resolve":
                desk.lifecycle.resolve_maintenance(room_id)
            elif action == "unblock":
                desk.lifecycle.unblock(room_id)
            else:
                desk.stays.add_payment(room_id, Decimal("10"), PaymentMethod.CASH)
        except FrontDeskError:
            pass
        check_board(desk)

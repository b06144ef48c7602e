"""
Front Desk - Room Lifecycle Controller

The only writer of room status once the board is running. Binds the room
registry, the stay ledger and the maintenance ticket log together:

| From                          | Event           | To          |
|-------------------------------|-----------------|-------------|
| available                     | check-in        | occupied    |
| occupied                      | checkout        | dirty       |
| dirty                         | cleaning        | available   |
| maintenance                   | resolve         | dirty       |
| available/dirty/maintenance   | ticket created  | maintenance |
| blocked                       | unblock (flag)  | available   |

Anything else is rejected with InvalidTransition and changes nothing.

Also owns the wake-call sub-machine (ringing set, snooze, dismiss).
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from frontdesk.models.enums import (
    ActivityAction,
    ActivityType,
    RoomStatus,
    TicketPriority,
    Workflow,
)
from frontdesk.services.audit import ActivityLog
from frontdesk.services.errors import InvalidTransition, ValidationFailed
from frontdesk.services.maintenance import Ticket, TicketLog
from frontdesk.services.room_registry import Room, RoomRegistry
from frontdesk.services.stay_ledger import GuestContract, Stay, StayLedger, StayTotals

logger = logging.getLogger(__name__)

ROUTES = {
    RoomStatus.AVAILABLE: Workflow.CHECK_IN,
    RoomStatus.OCCUPIED: Workflow.STAY_DETAIL,
    RoomStatus.DIRTY: Workflow.CLEANING,
    RoomStatus.MAINTENANCE: Workflow.MAINTENANCE_RESOLUTION,
    RoomStatus.BLOCKED: Workflow.BLOCKED_NOTICE,
}

TICKET_TARGETS = {RoomStatus.AVAILABLE, RoomStatus.DIRTY, RoomStatus.MAINTENANCE}

# Ticket resolution never pulls a room out of these
RESOLUTION_SKIPS = {RoomStatus.OCCUPIED, RoomStatus.BLOCKED}


def route_for(status: RoomStatus, ringing: bool = False) -> Workflow:
    """Workflow a room selection opens. Ringing overrides status."""
    if ringing:
        return Workflow.ALARM
    return ROUTES[status]


def _minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


class LifecycleController:
    """Room state machine over injected stores."""

    def __init__(
        self,
        registry: RoomRegistry,
        stays: StayLedger,
        tickets: TicketLog,
        activity: ActivityLog,
        clock: Callable[[], datetime] = datetime.now,
        allow_unblock: bool = False,
        snooze_minutes: int = 10,
        grace_minutes: int = 5,
    ):
        self.registry = registry
        self.stays = stays
        self.tickets = tickets
        self.activity = activity
        self._clock = clock
        self._allow_unblock = allow_unblock
        self._snooze = timedelta(minutes=snooze_minutes)
        self._grace = timedelta(minutes=max(grace_minutes, 1))
        self._ringing: set[int] = set()

    # =========================================================================
    # READS
    # =========================================================================

    @property
    def ringing(self) -> set[int]:
        return set(self._ringing)

    def is_ringing(self, room_id: int) -> bool:
        return room_id in self._ringing

    def guest_label(self, room_id: int) -> Optional[str]:
        stay = self.stays.find(room_id)
        return stay.guest_name if stay else None

    def route_selection(self, room_id: int) -> Workflow:
        room = self.registry.get(room_id)
        return route_for(room.status, room_id in self._ringing)

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def check_in(self, room_id: int, contract: GuestContract, actor: Optional[str] = None) -> Stay:
        room = self._expect(room_id, "check in", RoomStatus.AVAILABLE)
        if not (contract.guest_name or "").strip():
            raise ValidationFailed("Guest name is required")
        if not (contract.document or "").strip():
            raise ValidationFailed("Guest document is required")

        stay = self.stays.open_stay(room.id, room.number, contract)
        self.registry.set_status(room.id, RoomStatus.OCCUPIED)
        self.activity.log_check_in(room.number, contract.guest_name, actor)
        logger.info(f"[LIFECYCLE] Room {room.number}: available -> occupied ({contract.guest_name})")
        return stay

    def checkout(self, room_id: int, actor: Optional[str] = None) -> StayTotals:
        """Close the stay whatever the balance sign."""
        room = self._expect(room_id, "check out", RoomStatus.OCCUPIED)
        guest_name = self.stays.get(room.id).guest_name

        totals = self.stays.close_stay(room.id)
        self._ringing.discard(room.id)
        self.registry.set_status(room.id, RoomStatus.DIRTY)
        self.activity.log_check_out(room.number, guest_name, totals.revenue, actor)
        logger.info(f"[LIFECYCLE] Room {room.number}: occupied -> dirty (balance {totals.balance})")
        return totals

    def confirm_cleaning(self, room_id: int, housekeeper: Optional[str]) -> Room:
        room = self._expect(room_id, "confirm cleaning for", RoomStatus.DIRTY)
        if not (housekeeper or "").strip():
            raise ValidationFailed("A housekeeper must be selected")

        self.registry.set_status(room.id, RoomStatus.AVAILABLE)
        self.activity.log_cleaning(room.number, housekeeper.strip())
        logger.info(f"[LIFECYCLE] Room {room.number}: dirty -> available")
        return room

    def resolve_maintenance(self, room_id: int, actor: Optional[str] = None) -> Room:
        room = self._expect(room_id, "resolve maintenance for", RoomStatus.MAINTENANCE)

        ticket = self.tickets.active_for_room(room.id)
        if ticket is not None:
            self.tickets.resolve(ticket.id)
        self.registry.set_status(room.id, RoomStatus.DIRTY)
        self.activity.log_maintenance_resolved(room.number, actor=actor)
        logger.info(f"[LIFECYCLE] Room {room.number}: maintenance -> dirty")
        return room

    def create_ticket(
        self,
        room_number: str,
        issue: str,
        priority: TicketPriority = TicketPriority.MEDIUM,
        actor: Optional[str] = None,
    ) -> Ticket:
        """Open a ticket and force the bound room into maintenance.

        Occupied rooms are rejected. Blocked rooms keep their status.
        An unknown number gives an unbound ticket.
        """
        room = self.registry.find_by_number(room_number or "")
        if room is not None and room.status == RoomStatus.OCCUPIED:
            raise InvalidTransition(f"Room {room.number} is occupied; check the guest out first")

        ticket = self.tickets.create(room.id if room else None, room_number, issue, priority)

        if room is not None and room.status in TICKET_TARGETS:
            previous = room.status
            self.registry.set_status(room.id, RoomStatus.MAINTENANCE)
            logger.info(f"[LIFECYCLE] Room {room.number}: {previous.value} -> maintenance")
        self.activity.log_ticket_opened(ticket.room_number, ticket.issue, actor)
        return ticket

    def resolve_ticket(self, ticket_id: str, actor: Optional[str] = None) -> Ticket:
        ticket = self.tickets.resolve(ticket_id)

        room = self.registry.find(ticket.room_id) if ticket.room_id is not None else None
        synced = False
        if room is None:
            logger.info(f"[LIFECYCLE] Ticket {ticket.id} resolved; room {ticket.room_number} not found, sync skipped")
        elif room.status in RESOLUTION_SKIPS:
            logger.info(f"[LIFECYCLE] Ticket {ticket.id} resolved; room {room.number} is {room.status.value}, sync skipped")
        else:
            self.registry.set_status(room.id, RoomStatus.DIRTY)
            logger.info(f"[LIFECYCLE] Room {room.number}: -> dirty (ticket resolved)")
            synced = True

        self.activity.log_maintenance_resolved(
            ticket.room_number, ActivityAction.TICKET_RESOLVED, actor, room_synced=synced
        )
        return ticket

    def update_stay(self, room_id: int, changes: dict[str, Any]) -> Stay:
        """Edit a stay contract. A changed or disabled wake-up call stops the alarm."""
        before = self.stays.get(room_id).wake_schedule
        stay = self.stays.update_contract(room_id, changes)
        if room_id in self._ringing and stay.wake_schedule != before:
            self._ringing.discard(room_id)
            logger.info(f"[WAKE] Room {stay.room_number} alarm cleared by contract edit")
        return stay

    def unblock(self, room_id: int, actor: Optional[str] = None) -> Room:
        if not self._allow_unblock:
            raise InvalidTransition("Unblocking rooms is disabled")
        room = self._expect(room_id, "unblock", RoomStatus.BLOCKED)

        self.registry.set_status(room.id, RoomStatus.AVAILABLE)
        self.activity.append(
            ActivityType.SYSTEM,
            ActivityAction.ROOM_UNBLOCKED,
            f"Room {room.number} unblocked",
            actor,
        )
        logger.info(f"[LIFECYCLE] Room {room.number}: blocked -> available")
        return room

    # =========================================================================
    # WAKE CALLS
    # =========================================================================

    def check_wake_calls(self, now: Optional[datetime] = None) -> list[int]:
        """Move due rooms into the ringing set. Returns the rooms that started ringing.

        A schedule is due from its minute until the grace window ends, so a
        late tick still rings. Each schedule value rings once.
        """
        current = _minute(now or self._clock())
        started = []
        for stay in self.stays.list():
            schedule = stay.wake_schedule
            if schedule is None or stay.room_id in self._ringing:
                continue
            if stay.wake_fired_for == schedule:
                continue
            if schedule <= current < schedule + self._grace:
                stay.wake_fired_for = schedule
                self._ringing.add(stay.room_id)
                started.append(stay.room_id)
                logger.info(f"[WAKE] Room {stay.room_number} ringing ({schedule:%Y-%m-%d %H:%M})")
        return started

    def snooze(self, room_id: int) -> Stay:
        stay = self.stays.get(room_id)
        schedule = stay.wake_schedule
        if schedule is None:
            raise InvalidTransition(f"Room {stay.room_number} has no wake-up call scheduled")

        later = schedule + self._snooze
        self.stays.update_contract(room_id, {
            "wake_up_date": later.date(),
            "wake_up_call": later.time(),
        })
        self._ringing.discard(room_id)
        logger.info(f"[WAKE] Room {stay.room_number} snoozed until {later:%Y-%m-%d %H:%M}")
        return stay

    def dismiss(self, room_id: int) -> Stay:
        stay = self.stays.get(room_id)
        self.stays.update_contract(room_id, {"wake_up_enabled": False})
        self._ringing.discard(room_id)
        logger.info(f"[WAKE] Room {stay.room_number} dismissed")
        return stay

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _expect(self, room_id: int, verb: str, status: RoomStatus) -> Room:
        room = self.registry.get(room_id)
        if room.status != status:
            raise InvalidTransition(
                f"Cannot {verb} room {room.number}: status is {room.status.value}, expected {status.value}"
            )
        return room

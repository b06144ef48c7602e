"""Seed loader: builds the room board at startup.

Rooms come from the floor table. An optional JSON fixture sets initial
statuses and tickets:

    {
        "rooms": {"27": "dirty", "44": "blocked"},
        "tickets": [
            {"room_number": "52", "issue": "AC leaking", "priority": "high", "status": "in_progress"}
        ]
    }

Occupied cannot be seeded: no stay would back it.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field, ValidationError

from frontdesk.core.config import FloorConfig
from frontdesk.models.enums import RoomStatus, TicketPriority, TicketStatus
from frontdesk.services.errors import ValidationFailed
from frontdesk.services.maintenance import TicketLog
from frontdesk.services.room_registry import RoomRegistry

logger = logging.getLogger(__name__)

SEEDABLE_STATUSES = {
    RoomStatus.AVAILABLE,
    RoomStatus.DIRTY,
    RoomStatus.MAINTENANCE,
    RoomStatus.BLOCKED,
}


class SeedTicket(BaseModel):
    room_number: str
    issue: str
    priority: TicketPriority = TicketPriority.MEDIUM
    status: TicketStatus = TicketStatus.PENDING


class SeedFixture(BaseModel):
    rooms: dict[str, RoomStatus] = Field(default_factory=dict)
    tickets: list[SeedTicket] = Field(default_factory=list)


def read_fixture(path: str) -> SeedFixture:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return SeedFixture.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ValidationFailed(f"Invalid seed fixture {path}: {e}") from e


def apply_fixture(registry: RoomRegistry, tickets: TicketLog, fixture: SeedFixture) -> None:
    for number, status in fixture.rooms.items():
        if status not in SEEDABLE_STATUSES:
            raise ValidationFailed(f"Room {number} cannot be seeded as {status.value}")
        room = registry.find_by_number(number)
        if room is None:
            raise ValidationFailed(f"Seed fixture references unknown room {number}")
        registry.set_status(room.id, status)

    for item in fixture.tickets:
        room = registry.find_by_number(item.room_number)
        tickets.create(
            room.id if room else None,
            item.room_number,
            item.issue,
            item.priority,
            status=item.status,
        )

    logger.info(f"[SEED] Applied {len(fixture.rooms)} room statuses and {len(fixture.tickets)} tickets")


def seed_board(
    registry: RoomRegistry,
    tickets: TicketLog,
    floor_table: Iterable[FloorConfig],
    seed_path: Optional[str] = None,
) -> None:
    """Generate rooms, then apply the fixture when one is configured."""
    registry.generate(floor_table)
    if seed_path:
        apply_fixture(registry, tickets, read_fixture(seed_path))

"""Activity (audit) logging service."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from frontdesk.models.enums import ActivityAction, ActivityType

logger = logging.getLogger("frontdesk.activity")

SYSTEM_ACTOR = "System"


@dataclass(frozen=True)
class ActivityEntry:
    id: str
    type: ActivityType
    action: str
    description: str
    actor: str
    timestamp: datetime


class ActivityLog:
    """Append-only log of state transitions, newest first."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._entries: list[ActivityEntry] = []

    def append(
        self,
        type: ActivityType,
        action: str,
        description: str,
        actor: Optional[str] = None,
    ) -> ActivityEntry:
        """Create an activity entry."""
        entry = ActivityEntry(
            id=str(uuid.uuid4()),
            type=type,
            action=action.value if isinstance(action, ActivityAction) else action,
            description=description,
            actor=actor or SYSTEM_ACTOR,
            timestamp=self._clock(),
        )
        self._entries.insert(0, entry)
        logger.info(f"[{entry.type.value}] {entry.action}: {description} ({entry.actor})")
        return entry

    def list(self, type: Optional[ActivityType] = None, limit: Optional[int] = None) -> list[ActivityEntry]:
        entries = self._entries
        if type is not None:
            entries = [e for e in entries if e.type == type]
        if limit is not None:
            entries = entries[:limit]
        return list(entries)

    def log_check_in(self, room_number: str, guest_name: str, actor: Optional[str] = None) -> ActivityEntry:
        return self.append(
            ActivityType.CHECK_IN,
            ActivityAction.CHECK_IN_COMPLETED,
            f"Check-in for {guest_name} in room {room_number}",
            actor,
        )

    def log_check_out(
        self,
        room_number: str,
        guest_name: str,
        total: Decimal,
        actor: Optional[str] = None,
    ) -> ActivityEntry:
        return self.append(
            ActivityType.CHECK_OUT,
            ActivityAction.CHECK_OUT_COMPLETED,
            f"Checkout of {guest_name} from room {room_number}. Total: {total:.2f}",
            actor,
        )

    def log_cleaning(self, room_number: str, housekeeper: str) -> ActivityEntry:
        return self.append(
            ActivityType.CLEANING,
            ActivityAction.CLEANING_COMPLETED,
            f"Room {room_number} cleaned by {housekeeper}",
            "Housekeeping",
        )

    def log_ticket_opened(self, room_number: str, issue: str, actor: Optional[str] = None) -> ActivityEntry:
        return self.append(
            ActivityType.MAINTENANCE,
            ActivityAction.TICKET_OPENED,
            f"Maintenance logged for room {room_number}. Reason: {issue}",
            actor,
        )

    def log_maintenance_resolved(
        self,
        room_number: str,
        action: ActivityAction = ActivityAction.MAINTENANCE_COMPLETED,
        actor: Optional[str] = None,
        room_synced: bool = True,
    ) -> ActivityEntry:
        outcome = "Status changed to dirty." if room_synced else "Room status unchanged."
        return self.append(
            ActivityType.MAINTENANCE,
            action,
            f"Maintenance completed in room {room_number}. {outcome}",
            actor,
        )

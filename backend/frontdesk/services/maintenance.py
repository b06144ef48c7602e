"""
Front Desk - Maintenance Ticket Log

Tickets are append-and-resolve only: pending -> in_progress -> done.
Room status sync is done by the lifecycle controller, not here.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from frontdesk.models.enums import TicketPriority, TicketStatus
from frontdesk.services.errors import InvalidTransition, NotFound, ValidationFailed

logger = logging.getLogger(__name__)


@dataclass
class Ticket:
    id: str
    room_id: Optional[int]
    room_number: str
    issue: str
    priority: TicketPriority
    status: TicketStatus
    created_at: datetime
    resolved_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status != TicketStatus.DONE


class TicketRepository(ABC):
    """Storage interface for maintenance tickets."""

    @abstractmethod
    def get(self, ticket_id: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    def put(self, ticket: Ticket) -> None:
        pass

    @abstractmethod
    def list(self) -> list[Ticket]:
        pass


class InMemoryTicketRepository(TicketRepository):
    def __init__(self):
        self._tickets: dict[str, Ticket] = {}

    def get(self, ticket_id: str) -> Optional[Ticket]:
        return self._tickets.get(ticket_id)

    def put(self, ticket: Ticket) -> None:
        self._tickets[ticket.id] = ticket

    def list(self) -> list[Ticket]:
        return list(self._tickets.values())


class TicketLog:
    """Owns maintenance tickets."""

    def __init__(
        self,
        repository: Optional[TicketRepository] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._repo = repository or InMemoryTicketRepository()
        self._clock = clock

    def _ordered(self) -> list[Ticket]:
        return sorted(self._repo.list(), key=lambda t: t.created_at)

    def create(
        self,
        room_id: Optional[int],
        room_number: str,
        issue: str,
        priority: TicketPriority = TicketPriority.MEDIUM,
        status: TicketStatus = TicketStatus.PENDING,
    ) -> Ticket:
        issue = (issue or "").strip()
        room_number = (room_number or "").strip()
        if not room_number:
            raise ValidationFailed("Room number is required")
        if not issue:
            raise ValidationFailed("Issue description is required")

        ticket = Ticket(
            id=str(uuid.uuid4()),
            room_id=room_id,
            room_number=room_number,
            issue=issue,
            priority=priority,
            status=status,
            created_at=self._clock(),
        )
        if status == TicketStatus.DONE:
            ticket.resolved_at = ticket.created_at
        self._repo.put(ticket)

        if room_id is None:
            logger.info(f"[MAINTENANCE] Ticket {ticket.id} for unknown room {room_number} recorded unbound")
        return ticket

    def get(self, ticket_id: str) -> Ticket:
        ticket = self._repo.get(ticket_id)
        if ticket is None:
            raise NotFound(f"Ticket {ticket_id} not found")
        return ticket

    def resolve(self, ticket_id: str) -> Ticket:
        ticket = self.get(ticket_id)
        if ticket.status == TicketStatus.DONE:
            raise InvalidTransition(f"Ticket {ticket_id} is already resolved")

        ticket.status = TicketStatus.DONE
        ticket.resolved_at = self._clock()
        self._repo.put(ticket)
        return ticket

    def active_for_room(self, room_id: int) -> Optional[Ticket]:
        """First ticket bound to the room that is not done, oldest first."""
        for ticket in self._ordered():
            if ticket.room_id == room_id and ticket.is_active:
                return ticket
        return None

    def active(self) -> list[Ticket]:
        return [t for t in self._ordered() if t.is_active]

    def list(self, status: Optional[TicketStatus] = None) -> list[Ticket]:
        """Tickets, newest first."""
        tickets = self._ordered()
        if status is not None:
            tickets = [t for t in tickets if t.status == status]
        return list(reversed(tickets))

    def stats(self) -> dict[str, int]:
        counts = {s.value: 0 for s in TicketStatus}
        for ticket in self._repo.list():
            counts[ticket.status.value] += 1
        counts["total"] = sum(counts.values())
        return counts

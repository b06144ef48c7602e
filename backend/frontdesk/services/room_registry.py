"""Room registry: canonical room identity and lifecycle status."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from frontdesk.core.config import FloorConfig
from frontdesk.models.enums import BedLayout, RoomCategory, RoomStatus
from frontdesk.services.errors import NotFound

logger = logging.getLogger(__name__)


@dataclass
class Room:
    """A hotel room. The guest label is derived from the active stay, not stored here."""

    id: int
    number: str
    category: RoomCategory
    bed_layout: BedLayout
    floor: str
    base_price: Decimal
    status: RoomStatus = RoomStatus.AVAILABLE


def bed_layout_for(category: RoomCategory, number: int) -> BedLayout:
    """Parity rule: even rooms get a double bed, odd rooms the tier's alternative."""
    if category == RoomCategory.MASTER:
        return BedLayout.DOUBLE
    if number % 2 == 0:
        return BedLayout.DOUBLE
    if category == RoomCategory.STANDARD:
        return BedLayout.TWIN
    return BedLayout.TRIPLE


class RoomRepository(ABC):
    """Storage interface for rooms."""

    @abstractmethod
    def get(self, room_id: int) -> Optional[Room]:
        pass

    @abstractmethod
    def put(self, room: Room) -> None:
        pass

    @abstractmethod
    def list(self) -> list[Room]:
        pass


class InMemoryRoomRepository(RoomRepository):
    """Process-lifetime room storage, kept in insertion (room number) order."""

    def __init__(self):
        self._rooms: dict[int, Room] = {}

    def get(self, room_id: int) -> Optional[Room]:
        return self._rooms.get(room_id)

    def put(self, room: Room) -> None:
        self._rooms[room.id] = room

    def list(self) -> list[Room]:
        return list(self._rooms.values())


class RoomRegistry:
    """Holds every room. Status is mutated only through set_status()."""

    def __init__(self, repository: Optional[RoomRepository] = None):
        self._repo = repository or InMemoryRoomRepository()

    def generate(self, floor_table: Iterable[FloorConfig]) -> list[Room]:
        """Populate the registry from the floor table. Every room starts available."""
        rooms = []
        for floor in floor_table:
            category = RoomCategory(floor.category)
            for number in range(floor.first_number, floor.last_number + 1):
                room = Room(
                    id=number,
                    number=str(number),
                    category=category,
                    bed_layout=bed_layout_for(category, number),
                    floor=floor.name,
                    base_price=Decimal(floor.base_price),
                )
                self._repo.put(room)
                rooms.append(room)
        logger.info(f"[ROOMS] Generated {len(rooms)} rooms")
        return rooms

    def find(self, room_id: int) -> Optional[Room]:
        return self._repo.get(room_id)

    def get(self, room_id: int) -> Room:
        room = self._repo.get(room_id)
        if room is None:
            raise NotFound(f"Room {room_id} not found")
        return room

    def find_by_number(self, number: str) -> Optional[Room]:
        number = number.strip()
        for room in self._repo.list():
            if room.number == number:
                return room
        return None

    def list(self, status: Optional[RoomStatus] = None) -> list[Room]:
        rooms = self._repo.list()
        if status is not None:
            rooms = [r for r in rooms if r.status == status]
        return rooms

    def set_status(self, room_id: int, status: RoomStatus) -> Room:
        """Assign a status. No transition rules are checked here."""
        room = self.get(room_id)
        room.status = status
        self._repo.put(room)
        return room

    def base_price(self, category: RoomCategory) -> Optional[Decimal]:
        """Floor-table base price of the first room in a category."""
        for room in self._repo.list():
            if room.category == category:
                return room.base_price
        return None

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from frontdesk.core.config import FloorConfig, Settings
from frontdesk.models.enums import RoomStatus
from frontdesk.services.front_desk import FrontDesk
from frontdesk.services.stay_ledger import GuestContract


class FakeClock:
    """Callable clock the tests move by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now

    def set(self, value: datetime) -> datetime:
        self.now = value
        return self.now


def make_settings(**overrides) -> Settings:
    values = {
        "debug": True,
        "database_url": "sqlite+aiosqlite:///:memory:",
        "seed_path": None,
        "allow_unblock": False,
        "assistant_enabled": False,
        "gemini_api_key": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 10, 9, 0))


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def desk(settings, clock):
    return FrontDesk.from_settings(settings, clock=clock)


@pytest.fixture
def tower_desk(clock):
    """Board with a 300-series floor (rooms 301-310)."""
    floors = [
        FloorConfig(name="3rd floor", first_number=301, last_number=310, category="luxury", base_price=Decimal("400")),
    ]
    return FrontDesk.from_settings(make_settings(floor_table=floors), clock=clock)


@pytest.fixture
def contract():
    """Factory for guest contracts; defaults to a one-night stay at 250."""

    def _make(**overrides) -> GuestContract:
        values = {
            "guest_name": "Ana",
            "document": "123",
            "check_in_date": date(2026, 3, 10),
            "expected_checkout": date(2026, 3, 11),
            "daily_rate": Decimal("250"),
        }
        values.update(overrides)
        return GuestContract(**values)

    return _make


def assert_board_consistent(desk: FrontDesk) -> None:
    """Occupied iff a stay exists, and the guest label follows the stay."""
    for room in desk.registry.list():
        has_stay = desk.stays.find(room.id) is not None
        assert (room.status == RoomStatus.OCCUPIED) == has_stay, f"room {room.number}"
        assert (desk.lifecycle.guest_label(room.id) is not None) == has_stay, f"room {room.number}"


@pytest.fixture
def check_board():
    return assert_board_consistent

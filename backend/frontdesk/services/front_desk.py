"""FrontDesk container and the wake-call monitor.

One FrontDesk per process, held on app.state. It owns every store and
wires them into the lifecycle controller and the cashier.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from frontdesk.core.config import Settings
from frontdesk.services.audit import ActivityLog
from frontdesk.services.cashier import Cashier
from frontdesk.services.ledger import TransactionLedger
from frontdesk.services.lifecycle import LifecycleController
from frontdesk.services.maintenance import TicketLog
from frontdesk.services.room_registry import RoomRegistry
from frontdesk.services.seed import seed_board
from frontdesk.services.stay_ledger import StayLedger

logger = logging.getLogger(__name__)


class FrontDesk:
    """Owned stores plus the controllers built over them."""

    def __init__(self, settings: Settings, clock: Callable[[], datetime] = datetime.now):
        self.settings = settings
        self.clock = clock

        self.transactions = TransactionLedger(clock=clock)
        self.activity = ActivityLog(clock=clock)
        self.registry = RoomRegistry()
        self.stays = StayLedger(self.transactions, clock=clock)
        self.tickets = TicketLog(clock=clock)

        self.lifecycle = LifecycleController(
            self.registry,
            self.stays,
            self.tickets,
            self.activity,
            clock=clock,
            allow_unblock=settings.allow_unblock,
            snooze_minutes=settings.snooze_minutes,
            grace_minutes=settings.wake_call_grace_minutes,
        )
        self.cashier = Cashier(
            self.transactions,
            self.activity,
            clock=clock,
            tolerance=settings.shift_discrepancy_tolerance,
        )

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], datetime] = datetime.now) -> "FrontDesk":
        desk = cls(settings, clock=clock)
        seed_board(desk.registry, desk.tickets, settings.floor_table, settings.seed_path)
        return desk


class WakeCallMonitor:
    """Periodic wake-call check on the event loop.

    Polls at a fixed interval; the controller's grace window covers
    ticks that land late.
    """

    def __init__(self, lifecycle: LifecycleController, interval_seconds: float = 15.0):
        self.lifecycle = lifecycle
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="wake-call-monitor")
        logger.info(f"[WAKE] Monitor started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("[WAKE] Monitor stopped")

    def tick(self) -> list[int]:
        return self.lifecycle.check_wake_calls()

    async def _run(self) -> None:
        while True:
            try:
                self.tick()
            except Exception as e:
                logger.error(f"[WAKE] Check failed: {e}")
            await asyncio.sleep(self.interval_seconds)

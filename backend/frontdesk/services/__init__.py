"""Services for the front-desk backend."""

from frontdesk.services.audit import ActivityLog
from frontdesk.services.assistant import AssistantService, build_snapshot
from frontdesk.services.cashier import Cashier
from frontdesk.services.catalog import CatalogService
from frontdesk.services.front_desk import FrontDesk, WakeCallMonitor
from frontdesk.services.ledger import TransactionLedger
from frontdesk.services.lifecycle import LifecycleController
from frontdesk.services.maintenance import TicketLog
from frontdesk.services.room_registry import RoomRegistry
from frontdesk.services.staff import StaffService
from frontdesk.services.stay_ledger import StayLedger

__all__ = [
    "ActivityLog",
    "AssistantService",
    "build_snapshot",
    "Cashier",
    "CatalogService",
    "FrontDesk",
    "WakeCallMonitor",
    "TransactionLedger",
    "LifecycleController",
    "TicketLog",
    "RoomRegistry",
    "StaffService",
    "StayLedger",
]

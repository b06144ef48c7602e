"""API Routers for the front-desk backend."""

from frontdesk.routers.rooms import router as rooms_router
from frontdesk.routers.stays import router as stays_router
from frontdesk.routers.maintenance import router as maintenance_router
from frontdesk.routers.cashier import router as cashier_router
from frontdesk.routers.staff import router as staff_router
from frontdesk.routers.catalog import router as catalog_router
from frontdesk.routers.reports import router as reports_router
from frontdesk.routers.assistant import router as assistant_router

__all__ = [
    "rooms_router",
    "stays_router",
    "maintenance_router",
    "cashier_router",
    "staff_router",
    "catalog_router",
    "reports_router",
    "assistant_router",
]

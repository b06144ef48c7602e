"""SQLAlchemy models for the front desk.

Only reference data is persisted:
- Employee (staff directory)
- Product, RoomRate (catalog and pricing)
- AssistantLog
Room, stay and ticket state is process-lifetime (see frontdesk.services).
"""

from frontdesk.models.staff import Employee
from frontdesk.models.catalog import Product, RoomRate
from frontdesk.models.audit import AssistantLog

__all__ = [
    "Employee",
    "Product",
    "RoomRate",
    "AssistantLog",
]

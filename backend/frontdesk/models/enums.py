"""Enumeration types for the front-desk domain model."""

from enum import Enum


class RoomStatus(str, Enum):
    """Lifecycle status of a room."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    DIRTY = "dirty"
    MAINTENANCE = "maintenance"
    BLOCKED = "blocked"


class RoomCategory(str, Enum):
    """Room tier, one per floor."""
    STANDARD = "standard"
    LUXURY = "luxury"
    MASTER = "master"


class BedLayout(str, Enum):
    """Bed configuration of a room."""
    DOUBLE = "double"
    TWIN = "twin"
    TRIPLE = "triple"


class Workflow(str, Enum):
    """Workflow a room selection routes to."""
    ALARM = "alarm"
    CHECK_IN = "check_in"
    STAY_DETAIL = "stay_detail"
    CLEANING = "cleaning"
    MAINTENANCE_RESOLUTION = "maintenance_resolution"
    BLOCKED_NOTICE = "blocked_notice"


class DocumentType(str, Enum):
    """Guest identity document."""
    RG = "RG"
    CPF = "CPF"
    CNH = "CNH"
    PASSPORT = "PASSPORT"


class PaymentMethod(str, Enum):
    """Payment method tag."""
    CASH = "cash"
    CREDIT = "credit"
    DEBIT = "debit"
    PIX = "pix"


class TicketPriority(str, Enum):
    """Priority of a maintenance ticket."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TicketStatus(str, Enum):
    """Status of a maintenance ticket. No back transitions."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class TransactionKind(str, Enum):
    """Direction of a cash transaction."""
    INCOME = "income"
    EXPENSE = "expense"


class TransactionCategory(str, Enum):
    """Category of a cash transaction."""
    ACCOMMODATION = "accommodation"
    MINIBAR = "minibar"
    CONSUMPTION = "consumption"
    RESTAURANT = "restaurant"
    SUPPLIERS = "suppliers"
    OTHER = "other"


# Categories counted as consumption in shift reconciliation
CONSUMPTION_CATEGORIES = {
    TransactionCategory.MINIBAR,
    TransactionCategory.CONSUMPTION,
    TransactionCategory.RESTAURANT,
}


class ActivityType(str, Enum):
    """Type of an activity log entry."""
    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"
    RESERVATION = "RESERVATION"
    MAINTENANCE = "MAINTENANCE"
    CLEANING = "CLEANING"
    FINANCIAL = "FINANCIAL"
    SYSTEM = "SYSTEM"
    ACCESS = "ACCESS"


class ActivityAction(str, Enum):
    """Action codes written to the activity log."""
    CHECK_IN_COMPLETED = "CHECK_IN_COMPLETED"
    CHECK_OUT_COMPLETED = "CHECK_OUT_COMPLETED"
    CLEANING_COMPLETED = "CLEANING_COMPLETED"
    TICKET_OPENED = "TICKET_OPENED"
    TICKET_RESOLVED = "TICKET_RESOLVED"
    MAINTENANCE_COMPLETED = "MAINTENANCE_COMPLETED"
    ROOM_UNBLOCKED = "ROOM_UNBLOCKED"
    SHIFT_OPENED = "SHIFT_OPENED"
    SHIFT_CLOSED = "SHIFT_CLOSED"
    INCOME_RECORDED = "INCOME_RECORDED"
    EXPENSE_RECORDED = "EXPENSE_RECORDED"


class StaffRole(str, Enum):
    """Role of an employee."""
    HOUSEKEEPER = "housekeeper"
    RECEPTIONIST = "receptionist"
    MAINTENANCE = "maintenance"
    MANAGER = "manager"
    ADMINISTRATOR = "administrator"


class ProductCategory(str, Enum):
    """Product catalog category."""
    MINIBAR = "minibar"
    BAR = "bar"
    RESTAURANT = "restaurant"
    RECEPTION = "reception"
    OTHER = "other"

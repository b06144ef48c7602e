"""Staff directory schemas."""

from typing import Optional

from pydantic import EmailStr, Field

from frontdesk.schemas.base import BaseSchema, IDMixin, TimestampMixin
from frontdesk.models.enums import StaffRole


class EmployeeCreate(BaseSchema):
    """Add an employee."""

    name: str = Field(..., min_length=2, max_length=255)
    username: str = Field(..., min_length=3, max_length=100)
    role: StaffRole
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)


class EmployeeUpdate(BaseSchema):
    """Update employee."""

    name: Optional[str] = Field(None, min_length=2, max_length=255)
    username: Optional[str] = Field(None, min_length=3, max_length=100)
    role: Optional[StaffRole] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    is_active: Optional[bool] = None


class EmployeeResponse(BaseSchema, IDMixin, TimestampMixin):
    """Employee response."""

    name: str
    username: str
    role: StaffRole
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool

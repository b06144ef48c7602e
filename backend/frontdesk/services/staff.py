"""Staff directory service."""

import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.models.enums import StaffRole
from frontdesk.models.staff import Employee
from frontdesk.services.errors import NotFound, ValidationFailed

logger = logging.getLogger(__name__)

# Roles allowed to open a cash shift
OPERATOR_ROLES = {StaffRole.RECEPTIONIST, StaffRole.MANAGER, StaffRole.ADMINISTRATOR}


class StaffService:
    """Employee lookups and CRUD over the staff table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self, role: Optional[StaffRole] = None, active_only: bool = False) -> list[Employee]:
        query = select(Employee).order_by(Employee.name)
        if role is not None:
            query = query.where(Employee.role == role)
        if active_only:
            query = query.where(Employee.is_active.is_(True))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, employee_id: UUID) -> Employee:
        employee = await self.db.get(Employee, employee_id)
        if employee is None:
            raise NotFound(f"Employee {employee_id} not found")
        return employee

    async def create(self, data: dict[str, Any]) -> Employee:
        await self._check_username(data["username"])
        employee = Employee(**data)
        self.db.add(employee)
        await self.db.flush()
        logger.info(f"[STAFF] Added {employee.name} ({employee.role.value})")
        return employee

    async def update(self, employee_id: UUID, changes: dict[str, Any]) -> Employee:
        employee = await self.get(employee_id)
        if "username" in changes and changes["username"] != employee.username:
            await self._check_username(changes["username"])
        for field, value in changes.items():
            setattr(employee, field, value)
        await self.db.flush()
        return employee

    async def deactivate(self, employee_id: UUID) -> Employee:
        """Soft delete; past activity keeps the name."""
        return await self.update(employee_id, {"is_active": False})

    async def housekeeper(self, employee_id: Optional[UUID]) -> Optional[Employee]:
        """Active housekeeper for a cleaning confirmation, or None when none was selected."""
        if employee_id is None:
            return None
        employee = await self.get(employee_id)
        if not employee.is_active or employee.role != StaffRole.HOUSEKEEPER:
            raise ValidationFailed(f"{employee.name} is not an active housekeeper")
        return employee

    async def operator(self, employee_id: UUID) -> Employee:
        employee = await self.get(employee_id)
        if not employee.is_active or employee.role not in OPERATOR_ROLES:
            raise ValidationFailed(f"{employee.name} cannot operate the cashier")
        return employee

    async def _check_username(self, username: str) -> None:
        result = await self.db.execute(select(Employee.id).where(Employee.username == username))
        if result.scalar_one_or_none() is not None:
            raise ValidationFailed(f"Username '{username}' is already taken")

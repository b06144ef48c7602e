"""Staff directory router."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.core.database import get_db
from frontdesk.models.enums import StaffRole
from frontdesk.schemas.staff import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from frontdesk.services.staff import StaffService

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("", response_model=List[EmployeeResponse])
async def list_employees(
    role: Optional[StaffRole] = None,
    active_only: bool = False,
    db: AsyncSession = Depends(get_db),
):
    employees = await StaffService(db).list(role=role, active_only=active_only)
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(data: EmployeeCreate, db: AsyncSession = Depends(get_db)):
    employee = await StaffService(db).create(data.model_dump())
    await db.commit()
    await db.refresh(employee)
    return EmployeeResponse.model_validate(employee)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: UUID, db: AsyncSession = Depends(get_db)):
    return EmployeeResponse.model_validate(await StaffService(db).get(employee_id))


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: UUID,
    data: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
):
    employee = await StaffService(db).update(employee_id, data.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(employee)
    return EmployeeResponse.model_validate(employee)


@router.delete("/{employee_id}", response_model=EmployeeResponse)
async def deactivate_employee(employee_id: UUID, db: AsyncSession = Depends(get_db)):
    """Deactivate an employee. Records are never deleted."""
    employee = await StaffService(db).deactivate(employee_id)
    await db.commit()
    await db.refresh(employee)
    return EmployeeResponse.model_validate(employee)

from __future__ import annotations

from fastapi import APIRouter

from leave_management.api.deps import AdminDep, AuthDep
from leave_management.exceptions import NotFoundError
from leave_management.schemas.employee import EmployeeListResponse, UpsertEmployeeRequest
from leave_management.services.employee import EmployeeInfo, get_employee_directory

employees_router = APIRouter(prefix="/employees", tags=["employees"])


@employees_router.put("/{employee_id}", response_model=EmployeeInfo)
async def upsert_employee(
    employee_id: str,
    payload: UpsertEmployeeRequest,
    auth: AdminDep,
) -> EmployeeInfo:
    """Create or update an employee in the stub directory (admin only)."""
    directory = get_employee_directory()
    employee = EmployeeInfo(id=employee_id, **payload.model_dump())
    directory.seed(employee)  # ty: ignore[unresolved-attribute]
    return employee


@employees_router.get("/{employee_id}", response_model=EmployeeInfo)
async def get_employee(employee_id: str, auth: AuthDep) -> EmployeeInfo:
    """Get one employee profile from the directory."""
    employee = await get_employee_directory().get_employee(employee_id)
    if employee is None:
        raise NotFoundError("Employee", employee_id)
    return employee


@employees_router.get("", response_model=EmployeeListResponse)
async def list_employees(auth: AuthDep) -> EmployeeListResponse:
    """List active employees from the directory."""
    employees = await get_employee_directory().get_employees()
    return EmployeeListResponse(items=employees, total=len(employees))

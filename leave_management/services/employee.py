from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel


class EmployeeInfo(BaseModel):
    """Employee profile from the employee directory."""

    id: str
    first_name: str
    last_name: str
    email: str
    is_active: bool = True


@runtime_checkable
class EmployeeDirectory(Protocol):
    """Interface for the employee directory (identity service)."""

    async def get_employees(self) -> list[EmployeeInfo]:
        """List all active employees."""
        ...

    async def get_employee(self, employee_id: str) -> EmployeeInfo | None:
        """Fetch one employee profile. Returns None if not found."""
        ...


class InMemoryEmployeeDirectory:
    """In-memory stub implementation for development."""

    def __init__(self) -> None:
        self._employees: dict[str, EmployeeInfo] = {}

    def seed(self, employee: EmployeeInfo) -> None:
        """Seed an employee for testing."""
        self._employees[employee.id] = employee

    async def get_employees(self) -> list[EmployeeInfo]:
        """List all active employees."""
        return [e for e in self._employees.values() if e.is_active]

    async def get_employee(self, employee_id: str) -> EmployeeInfo | None:
        """Fetch one employee profile. Returns None if not found."""
        return self._employees.get(employee_id)


_employee_directory: EmployeeDirectory = InMemoryEmployeeDirectory()


def get_employee_directory() -> EmployeeDirectory:
    """Return the configured employee directory."""
    return _employee_directory


def set_employee_directory(directory: EmployeeDirectory) -> None:
    """Override the directory (for testing or production wiring)."""
    global _employee_directory
    _employee_directory = directory

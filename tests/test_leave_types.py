"""Tests for leave type management (service layer and API)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from leave_management.exceptions import NotFoundError, ValidationError
from leave_management.models.leave_allocation import LeaveAllocation
from leave_management.schemas.leave_type import LeaveTypePayload
from leave_management.services import leave_type as leave_type_service

if TYPE_CHECKING:
    from httpx import AsyncClient

    from leave_management.repositories.unit_of_work import UnitOfWork

ADMIN_HEADERS = {"X-User-Id": "admin-1", "X-Role": "admin"}
EMPLOYEE_HEADERS = {"X-User-Id": "alice", "X-Role": "employee"}


# ---------------------------------------------------------------------------
# Service layer
# ---------------------------------------------------------------------------


async def test_create_leave_type(uow: UnitOfWork) -> None:
    result = await leave_type_service.create_leave_type(uow, LeaveTypePayload(name="Vacation", default_days=10))
    assert result.success is True
    assert result.message == "Creation Successful"
    assert result.errors == []
    assert result.id is not None

    stored = await leave_type_service.get_leave_type(uow, result.id)
    assert stored.name == "Vacation"
    assert stored.default_days == 10


async def test_create_leave_type_rejected_without_write(uow: UnitOfWork) -> None:
    result = await leave_type_service.create_leave_type(uow, LeaveTypePayload(name="", default_days=150))
    assert result.success is False
    assert result.message == "Creation Failed"
    assert result.errors == ["Name is required.", "Default Days must be less than 100."]
    assert result.id is None
    assert (await leave_type_service.list_leave_types(uow)).total == 0


async def test_list_leave_types(uow: UnitOfWork) -> None:
    for name in ("Vacation", "Sick"):
        await leave_type_service.create_leave_type(uow, LeaveTypePayload(name=name, default_days=5))
    result = await leave_type_service.list_leave_types(uow)
    assert result.total == 2
    assert [item.name for item in result.items] == ["Vacation", "Sick"]


async def test_get_missing_leave_type(uow: UnitOfWork) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await leave_type_service.get_leave_type(uow, 404)
    assert exc_info.value.message == "LeaveType (404) was not found"


async def test_update_leave_type(uow: UnitOfWork) -> None:
    created = await leave_type_service.create_leave_type(uow, LeaveTypePayload(name="Vacation", default_days=10))
    assert created.id is not None
    updated = await leave_type_service.update_leave_type(
        uow, created.id, LeaveTypePayload(name="Annual Leave", default_days=20)
    )
    assert updated.name == "Annual Leave"
    assert updated.default_days == 20


async def test_update_leave_type_validation(uow: UnitOfWork) -> None:
    created = await leave_type_service.create_leave_type(uow, LeaveTypePayload(name="Vacation", default_days=10))
    assert created.id is not None
    with pytest.raises(ValidationError) as exc_info:
        await leave_type_service.update_leave_type(uow, created.id, LeaveTypePayload(name="Vacation", default_days=-1))
    assert exc_info.value.errors == ["Default Days must be at least 0."]
    assert (await leave_type_service.get_leave_type(uow, created.id)).default_days == 10


async def test_update_missing_leave_type(uow: UnitOfWork) -> None:
    with pytest.raises(NotFoundError):
        await leave_type_service.update_leave_type(uow, 77, LeaveTypePayload(name="Vacation", default_days=1))


async def test_delete_leave_type_removes_its_allocations(uow: UnitOfWork) -> None:
    created = await leave_type_service.create_leave_type(uow, LeaveTypePayload(name="Vacation", default_days=10))
    assert created.id is not None
    await uow.leave_allocations.add_allocations(
        [LeaveAllocation(employee_id="alice", leave_type_id=created.id, period=2026, number_of_days=10)]
    )
    await uow.save()

    await leave_type_service.delete_leave_type(uow, created.id)

    assert (await leave_type_service.list_leave_types(uow)).total == 0
    assert await uow.leave_allocations.get_all() == []


async def test_delete_missing_leave_type(uow: UnitOfWork) -> None:
    with pytest.raises(NotFoundError):
        await leave_type_service.delete_leave_type(uow, 9)


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


async def test_api_create_leave_type(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/leave-types", json={"name": "Vacation", "default_days": 10}, headers=ADMIN_HEADERS
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["id"] is not None


async def test_api_create_leave_type_failure(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/leave-types", json={"name": "x" * 60, "default_days": 10}, headers=ADMIN_HEADERS
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["errors"] == ["Name must not exceed 50 characters."]


async def test_api_create_leave_type_requires_admin(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/leave-types", json={"name": "Vacation", "default_days": 10}, headers=EMPLOYEE_HEADERS
    )
    assert resp.status_code == 403
    assert resp.json()["error"] == "ForbiddenError"


async def test_api_requires_user_header(async_client: AsyncClient) -> None:
    resp = await async_client.get("/leave-types")
    assert resp.status_code == 422


async def test_api_list_and_get(async_client: AsyncClient) -> None:
    created = await async_client.post(
        "/leave-types", json={"name": "Sick", "default_days": 5}, headers=ADMIN_HEADERS
    )
    leave_type_id = created.json()["id"]

    listed = await async_client.get("/leave-types", headers=EMPLOYEE_HEADERS)
    assert listed.status_code == 200
    assert listed.json()["total"] == 1

    fetched = await async_client.get(f"/leave-types/{leave_type_id}", headers=EMPLOYEE_HEADERS)
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Sick"


async def test_api_get_missing(async_client: AsyncClient) -> None:
    resp = await async_client.get("/leave-types/999", headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "LeaveType (999) was not found"


async def test_api_update_validation_error(async_client: AsyncClient) -> None:
    created = await async_client.post(
        "/leave-types", json={"name": "Sick", "default_days": 5}, headers=ADMIN_HEADERS
    )
    leave_type_id = created.json()["id"]
    resp = await async_client.put(
        f"/leave-types/{leave_type_id}", json={"name": "Sick", "default_days": 100}, headers=ADMIN_HEADERS
    )
    assert resp.status_code == 400
    assert resp.json()["errors"] == ["Default Days must be less than 100."]


async def test_api_delete(async_client: AsyncClient) -> None:
    created = await async_client.post(
        "/leave-types", json={"name": "Sick", "default_days": 5}, headers=ADMIN_HEADERS
    )
    leave_type_id = created.json()["id"]

    resp = await async_client.delete(f"/leave-types/{leave_type_id}", headers=ADMIN_HEADERS)
    assert resp.status_code == 204
    missing = await async_client.get(f"/leave-types/{leave_type_id}", headers=ADMIN_HEADERS)
    assert missing.status_code == 404

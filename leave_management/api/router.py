from fastapi import APIRouter

from leave_management.api.employees import employees_router
from leave_management.api.leave_allocations import router as leave_allocations_router
from leave_management.api.leave_requests import router as leave_requests_router
from leave_management.api.leave_types import router as leave_types_router

api_router = APIRouter()
api_router.include_router(leave_types_router)
api_router.include_router(leave_allocations_router)
api_router.include_router(leave_requests_router)
api_router.include_router(employees_router)

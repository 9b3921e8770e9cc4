"""
Backend API package initialization.

This package contains FastAPI router modules for the leveling matrix:
- levels: list, get and create engineering levels
- criteria: create level criteria
- matrix: search, filter, compare, overview and seed
"""

from fastapi import APIRouter

from job_matrix.api.levels import router as levels_router
from job_matrix.api.criteria import router as criteria_router
from job_matrix.api.matrix import router as matrix_router

api_router = APIRouter()

api_router.include_router(levels_router, prefix="/levels", tags=["levels"])
api_router.include_router(criteria_router, prefix="/criteria", tags=["criteria"])
api_router.include_router(matrix_router, tags=["matrix"])  # matrix router has its own prefix

__all__ = [
    "api_router",
    "levels_router",
    "criteria_router",
    "matrix_router",
]

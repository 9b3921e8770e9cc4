"""
FastAPI router module for engineering levels.

Key Endpoints:
- GET  /levels              - All levels with their criteria, ordered by id
- POST /levels              - Create a level (409 when the id is taken)
- GET  /levels/{level_id}   - One level with its criteria (404 when unknown)

Level ids may contain a slash ("L1/L2"), so the id segment is declared as a
path converter: GET /levels/L1/L2 resolves to level "L1/L2".

Dependencies:
- job_matrix/core/dependencies.py: MatrixStoreDep
- job_matrix/services/levels.py, authoring.py
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from job_matrix.core.dependencies import MatrixStoreDep
from job_matrix.core.exceptions import LevelConflictError
from job_matrix.models.schemas import (
    CreateEngineeringLevelInput,
    EngineeringLevel,
    EngineeringLevelWithCriteria,
)
from job_matrix.services.authoring import create_engineering_level
from job_matrix.services.levels import get_all_levels, get_level_by_id


router = APIRouter()


@router.get("", response_model=List[EngineeringLevelWithCriteria])
async def list_levels(store: MatrixStoreDep) -> List[EngineeringLevelWithCriteria]:
    """
    List every engineering level with its criteria.

    Returns:
        Levels ordered by id; criteria ordered by (category, sub_category).
    """
    try:
        return await get_all_levels(store)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to list levels: {str(e)}"
        )


@router.post(
    "",
    response_model=EngineeringLevel,
    status_code=status.HTTP_201_CREATED,
)
async def create_level(
    level_input: CreateEngineeringLevelInput,
    store: MatrixStoreDep,
) -> EngineeringLevel:
    """
    Create a new engineering level.

    Raises:
        HTTPException 409: If a level with the same id already exists.
        HTTPException 500: If the store operation fails.
    """
    try:
        return await create_engineering_level(store, level_input)
    except LevelConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to create level: {str(e)}"
        )


@router.get("/{level_id:path}", response_model=EngineeringLevelWithCriteria)
async def get_level(level_id: str, store: MatrixStoreDep) -> EngineeringLevelWithCriteria:
    """
    Get one engineering level by id.

    Args:
        level_id: Level id, e.g. "L3" or "L1/L2".

    Raises:
        HTTPException 404: If no level has this id.
        HTTPException 500: If the store operation fails.
    """
    try:
        level = await get_level_by_id(store, level_id)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve level: {str(e)}"
        )

    if level is None:
        raise HTTPException(
            status_code=404,
            detail=f"Engineering level {level_id} not found"
        )

    return level

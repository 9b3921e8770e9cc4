"""
FastAPI router module for level criteria.

Key Endpoints:
- POST /criteria - Attach a criterion to an existing level (404 when the level is unknown)
"""

from fastapi import APIRouter, HTTPException, status

from job_matrix.core.dependencies import MatrixStoreDep
from job_matrix.core.exceptions import LevelNotFoundError
from job_matrix.models.schemas import CreateLevelCriterionInput, LevelCriterion
from job_matrix.services.authoring import create_level_criterion


router = APIRouter()


@router.post(
    "",
    response_model=LevelCriterion,
    status_code=status.HTTP_201_CREATED,
)
async def create_criterion(
    criterion_input: CreateLevelCriterionInput,
    store: MatrixStoreDep,
) -> LevelCriterion:
    """
    Create a level criterion.

    Example Request:
        POST /criteria
        {
            "engineering_level_id": "L3",
            "category": "Craft",
            "sub_category": "Scope",
            "description": "Owns tasks and small projects"
        }

    Raises:
        HTTPException 404: If engineering_level_id matches no level.
        HTTPException 500: If the store operation fails.
    """
    try:
        return await create_level_criterion(store, criterion_input)
    except LevelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to create criterion: {str(e)}"
        )

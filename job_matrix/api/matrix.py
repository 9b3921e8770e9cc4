"""
FastAPI router module for matrix-wide views.

Key Endpoints:
- GET  /matrix/search?query=  - Free-text search with highlighted snippets
- POST /matrix/filter         - All levels, criteria pruned by category / sub-category
- POST /matrix/compare        - Two to four levels side by side, in request order
- GET  /matrix/overview       - Category taxonomy, level ids and level groups
- POST /matrix/seed           - Load the sample dataset (409 when already seeded)

Filter and compare take JSON bodies (FilterInput, ComparisonInput) so the
list-valued inputs are validated by the pydantic models; a compare request
with fewer than two or more than four ids is rejected with 422.

Dependencies:
- job_matrix/core/dependencies.py: MatrixStoreDep
- job_matrix/services/: search, filtering, comparison, overview, seed
"""

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Query, status

from job_matrix.core.dependencies import MatrixStoreDep
from job_matrix.core.exceptions import LevelConflictError
from job_matrix.models.schemas import (
    ComparisonInput,
    EngineeringLevelWithCriteria,
    FilterInput,
    JobMatrixOverview,
    SearchInput,
    SearchResult,
)
from job_matrix.services.comparison import compare_levels
from job_matrix.services.filtering import get_filtered_levels
from job_matrix.services.overview import get_matrix_overview
from job_matrix.services.search import search_levels
from job_matrix.services.seed import SEED_ENGINEERING_LEVELS, SEED_LEVEL_CRITERIA, seed_database


router = APIRouter(prefix="/matrix")


@router.get("/search", response_model=List[SearchResult])
async def search(
    store: MatrixStoreDep,
    query: str = Query(..., description="Text to look for; blank returns no results"),
) -> List[SearchResult]:
    """
    Search level job titles, level summaries and criteria.

    Returns:
        One result per (level_id, category, sub_category).
    """
    try:
        return await search_levels(store, SearchInput(query=query))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post("/filter", response_model=List[EngineeringLevelWithCriteria])
async def filter_levels(
    filter_input: FilterInput,
    store: MatrixStoreDep,
) -> List[EngineeringLevelWithCriteria]:
    """
    Return every level with only the criteria matching the allow-lists.

    Example Request:
        POST /matrix/filter
        {"categories": ["Craft"], "sub_categories": ["Scope"]}
    """
    try:
        return await get_filtered_levels(store, filter_input)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to filter levels: {str(e)}"
        )


@router.post("/compare", response_model=List[EngineeringLevelWithCriteria])
async def compare(
    comparison_input: ComparisonInput,
    store: MatrixStoreDep,
) -> List[EngineeringLevelWithCriteria]:
    """
    Compare two to four levels.

    Example Request:
        POST /matrix/compare
        {"level_ids": ["L3", "L5", "EM1"]}
    """
    try:
        return await compare_levels(store, comparison_input)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compare levels: {str(e)}"
        )


@router.get("/overview", response_model=JobMatrixOverview)
async def overview(store: MatrixStoreDep) -> JobMatrixOverview:
    """Return the navigation overview used by filtering UIs."""
    try:
        return await get_matrix_overview(store)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to build matrix overview: {str(e)}"
        )


@router.post("/seed", status_code=status.HTTP_201_CREATED)
async def seed(store: MatrixStoreDep) -> Dict[str, Any]:
    """
    Load the sample dataset.

    Returns:
        { success: true, levels: <count>, criteria: <count> }

    Raises:
        HTTPException 409: If any sample level id already exists; nothing is written.
        HTTPException 500: If the store operation fails.
    """
    try:
        await seed_database(store)
    except LevelConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to seed database: {str(e)}"
        )

    return {
        "success": True,
        "levels": len(SEED_ENGINEERING_LEVELS),
        "criteria": len(SEED_LEVEL_CRITERIA),
    }

"""
Package initialization file for backend models.

This module exports all Pydantic schemas and enumerations from schemas.py and
enums.py, making them importable from job_matrix.models directly.

Usage:
    from job_matrix.models import (
        EngineeringLevelWithCriteria,
        SearchInput,
        LevelGroup,
    )
"""

from job_matrix.models.enums import LevelGroup

from job_matrix.models.schemas import (
    # Stored entities
    LevelCriterion,
    EngineeringLevel,
    EngineeringLevelWithCriteria,
    # Derived views
    SearchResult,
    JobMatrixOverview,
    # Operation inputs
    CreateEngineeringLevelInput,
    CreateLevelCriterionInput,
    SearchInput,
    FilterInput,
    ComparisonInput,
)

__all__ = [
    # Enums
    'LevelGroup',
    # Stored entities
    'LevelCriterion',
    'EngineeringLevel',
    'EngineeringLevelWithCriteria',
    # Derived views
    'SearchResult',
    'JobMatrixOverview',
    # Operation inputs
    'CreateEngineeringLevelInput',
    'CreateLevelCriterionInput',
    'SearchInput',
    'FilterInput',
    'ComparisonInput',
]

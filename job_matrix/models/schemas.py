"""
Pydantic request/response models for the Job Leveling Matrix backend.

This module provides type-safe data validation and serialization for all
service and API contracts: the stored entities (levels and their criteria),
the derived views (search results, matrix overview) and the inputs of every
read and write operation.

All models use Pydantic v2 syntax.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict


# =============================================================================
# Stored Entities
# =============================================================================


class LevelCriterion(BaseModel):
    """
    One graded expectation attached to a level.

    The id is assigned by the store. Several criteria may share the same
    (engineering_level_id, category, sub_category).
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "engineering_level_id": "L3",
                "category": "Craft",
                "sub_category": "Scope",
                "description": "Owns tasks and small projects"
            }
        }
    )

    id: int = Field(..., description="Store-generated criterion id")
    engineering_level_id: str = Field(..., description="Id of the owning level")
    category: str = Field(..., description="Top-level taxonomy, e.g. Craft, Impact, Growth")
    sub_category: str = Field(..., description="Second-level taxonomy, e.g. Planning")
    description: Optional[str] = Field(
        default=None,
        description="Expectation text; None when undefined for this level"
    )


class EngineeringLevel(BaseModel):
    """
    A rung in the engineering career ladder.

    The id is human-assigned ("L3", "TL1", "EM1", "L1/L2") and never
    generated. created_at is set by the store at insert time.
    """
    id: str = Field(..., description="Human-assigned level id")
    title: str = Field(..., description="Display title")
    job_title: Optional[str] = Field(default=None, description="Corresponding common job title")
    one_sentence_description: Optional[str] = Field(default=None, description="Brief summary")
    scope_of_influence_summary: Optional[str] = Field(default=None)
    ownership_summary: Optional[str] = Field(default=None)
    trajectory_notes: Optional[str] = Field(default=None)
    created_at: datetime = Field(..., description="Creation timestamp set by the store")


class EngineeringLevelWithCriteria(EngineeringLevel):
    """A level together with its criteria; criteria is always present, possibly empty."""
    criteria: List[LevelCriterion] = Field(default_factory=list)


# =============================================================================
# Derived Views
# =============================================================================


class SearchResult(BaseModel):
    """
    One search hit, unique per (level_id, category, sub_category).

    match_snippet holds up to 30 characters of context on each side of the
    match, '...' where the source text was cut, and every occurrence of the
    query wrapped in '**'.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "level_id": "L3",
                "level_title": "L3",
                "category": "Craft",
                "sub_category": "Technical Expertise",
                "description": "Has sufficient practical and foundational knowledge...",
                "match_snippet": "**Technical** Expertise"
            }
        }
    )

    level_id: str
    level_title: str
    category: str
    sub_category: str
    description: str = Field(..., description="Criterion description, '' when absent")
    match_snippet: str


class JobMatrixOverview(BaseModel):
    """
    Navigation summary of the matrix.

    level_groups always carries the IC, TL and EM keys, even when empty.
    """
    categories: List[str] = Field(default_factory=list)
    sub_categories: Dict[str, List[str]] = Field(default_factory=dict)
    level_ids: List[str] = Field(default_factory=list)
    level_groups: Dict[str, List[str]] = Field(default_factory=dict)


# =============================================================================
# Operation Inputs
# =============================================================================


class CreateEngineeringLevelInput(BaseModel):
    """Input for creating an engineering level."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "L4",
                "title": "L4",
                "job_title": "Senior Engineer",
                "one_sentence_description": "Owns features end to end",
                "scope_of_influence_summary": "Their team",
                "ownership_summary": None,
                "trajectory_notes": None
            }
        }
    )

    id: str = Field(..., min_length=1)
    title: str
    job_title: Optional[str] = None
    one_sentence_description: Optional[str] = None
    scope_of_influence_summary: Optional[str] = None
    ownership_summary: Optional[str] = None
    trajectory_notes: Optional[str] = None


class CreateLevelCriterionInput(BaseModel):
    """Input for attaching a criterion to an existing level."""
    engineering_level_id: str
    category: str
    sub_category: str
    description: Optional[str] = None


class SearchInput(BaseModel):
    """Free-text search input. Blank queries are allowed and yield no results."""
    query: str


class FilterInput(BaseModel):
    """
    Category / sub-category allow-lists.

    None or an empty list means no restriction on that dimension.
    """
    categories: Optional[List[str]] = None
    sub_categories: Optional[List[str]] = None


class ComparisonInput(BaseModel):
    """Between two and four level ids, in the order they should be compared."""
    level_ids: List[str] = Field(..., min_length=2, max_length=4)

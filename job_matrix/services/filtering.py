"""
Filter engine service.

Prunes criteria by category / sub-category allow-lists while keeping every
level in the result, even a level left with no matching criteria.
"""

import logging
from typing import List

from job_matrix.core.store import MatrixStore
from job_matrix.models.schemas import EngineeringLevelWithCriteria, FilterInput, LevelCriterion
from job_matrix.services.grouping import assemble_levels


logger = logging.getLogger(__name__)


async def get_filtered_levels(
    store: MatrixStore,
    filter_input: FilterInput,
) -> List[EngineeringLevelWithCriteria]:
    """
    Return all levels with only the criteria that pass the filters.

    A criterion is kept when its category is allowed (or no category filter
    is given) and its sub-category is allowed (or no sub-category filter is
    given). None and an empty list both mean "no restriction".

    Args:
        store: Store accessor for the request.
        filter_input: Optional categories and sub_categories allow-lists.

    Returns:
        Every level, sorted by id.
    """
    categories = set(filter_input.categories or ())
    sub_categories = set(filter_input.sub_categories or ())

    def include(criterion: LevelCriterion) -> bool:
        return (
            (not categories or criterion.category in categories)
            and (not sub_categories or criterion.sub_category in sub_categories)
        )

    try:
        rows = await store.fetch_levels_with_criteria()
        levels = assemble_levels(rows, include=include)
    except Exception:
        logger.exception("Filter levels operation failed")
        raise

    logger.info(
        f"Filtered {len(levels)} levels "
        f"(categories={sorted(categories)}, sub_categories={sorted(sub_categories)})"
    )
    return sorted(levels, key=lambda level: level.id)

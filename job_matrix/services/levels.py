"""
Level reader service.

Fetches engineering levels together with the criteria attached to them.

Operations:
- get_all_levels: every level ordered by id, criteria ordered by
  (category, sub_category)
- get_level_by_id: one level with its criteria, or None when the id is unknown

Both return an empty criteria list for a level that has none.
"""

import logging
from typing import List, Optional

from job_matrix.core.store import MatrixStore
from job_matrix.models.schemas import EngineeringLevelWithCriteria, LevelCriterion
from job_matrix.services.grouping import assemble_levels, group_rows_by_key, level_fields


logger = logging.getLogger(__name__)


async def get_all_levels(store: MatrixStore) -> List[EngineeringLevelWithCriteria]:
    """
    Return every engineering level with its criteria.

    Levels and criteria are fetched with two ordered queries and combined in
    memory, so each level's criteria keep the (category, sub_category) order
    of the criteria query.

    Args:
        store: Store accessor for the request.

    Returns:
        Levels ordered by id.

    Raises:
        asyncpg.PostgresError: Propagated unchanged after logging.
    """
    try:
        level_rows = await store.fetch_levels()
        criterion_rows = await store.fetch_criteria()

        criteria_by_level = group_rows_by_key(
            criterion_rows,
            key=lambda row: row['engineering_level_id'],
        )

        levels = [
            EngineeringLevelWithCriteria(
                **level_fields(row),
                criteria=[
                    LevelCriterion(**criterion)
                    for criterion in criteria_by_level.get(row['id'], [])
                ],
            )
            for row in level_rows
        ]
    except Exception:
        logger.exception("Failed to get all levels")
        raise

    logger.info(f"Fetched {len(levels)} levels with {len(criterion_rows)} criteria")
    return levels


async def get_level_by_id(
    store: MatrixStore,
    level_id: str,
) -> Optional[EngineeringLevelWithCriteria]:
    """
    Return one engineering level with its criteria.

    Args:
        store: Store accessor for the request.
        level_id: Level id, e.g. "L3" or "L1/L2".

    Returns:
        The level, or None when no level has this id.
    """
    try:
        rows = await store.fetch_levels_with_criteria([level_id])
    except Exception:
        logger.exception(f"Get level by ID failed for {level_id!r}")
        raise

    if not rows:
        logger.info(f"Level {level_id!r} not found")
        return None

    return assemble_levels(rows)[0]

"""
Overview builder service.

Derives the navigation summary of the matrix: the category taxonomy, every
level id, and the level ids grouped by career track.

Level grouping policy (first match wins):
    1. id starts with "L" or contains "L1/L2"  -> IC
    2. id starts with "TL"                     -> TL
    3. id starts with "EM"                     -> EM
    4. anything else                           -> no group
"""

import logging
from typing import Optional

from job_matrix.core.store import MatrixStore
from job_matrix.models.enums import LevelGroup
from job_matrix.models.schemas import JobMatrixOverview
from job_matrix.services.grouping import group_rows_by_key


logger = logging.getLogger(__name__)


def classify_level_id(level_id: str) -> Optional[LevelGroup]:
    """
    Map a level id to its career track by naming convention.

    Example:
        >>> classify_level_id("L1/L2")
        <LevelGroup.IC: 'IC'>
        >>> classify_level_id("TL2")
        <LevelGroup.TL: 'TL'>
        >>> classify_level_id("VP1") is None
        True
    """
    if level_id.startswith("L") or "L1/L2" in level_id:
        return LevelGroup.IC
    if level_id.startswith("TL"):
        return LevelGroup.TL
    if level_id.startswith("EM"):
        return LevelGroup.EM
    return None


async def get_matrix_overview(store: MatrixStore) -> JobMatrixOverview:
    """
    Build the matrix overview.

    Args:
        store: Store accessor for the request.

    Returns:
        JobMatrixOverview with categories in ascending order, each category's
        distinct sub-categories in ascending order, all level ids in
        ascending order, and level_groups always keyed by IC, TL and EM.
    """
    try:
        category_pairs = await store.fetch_category_pairs()
        level_ids = await store.fetch_level_ids()
    except Exception:
        logger.exception("Failed to get matrix overview")
        raise

    pairs_by_category = group_rows_by_key(category_pairs, key=lambda row: row['category'])
    sub_categories = {
        category: list(dict.fromkeys(row['sub_category'] for row in rows))
        for category, rows in pairs_by_category.items()
    }

    ids_by_group = group_rows_by_key(level_ids, key=classify_level_id)
    level_groups = {group.value: ids_by_group.get(group, []) for group in LevelGroup}

    logger.info(
        f"Matrix overview: {len(pairs_by_category)} categories, {len(level_ids)} levels"
    )
    return JobMatrixOverview(
        categories=list(pairs_by_category),
        sub_categories=sub_categories,
        level_ids=level_ids,
        level_groups=level_groups,
    )

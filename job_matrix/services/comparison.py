"""
Comparator service.

Returns a handful of levels side by side, in the order the caller asked for them.
"""

import logging
from typing import List

from job_matrix.core.store import MatrixStore
from job_matrix.models.schemas import ComparisonInput, EngineeringLevelWithCriteria
from job_matrix.services.grouping import assemble_levels


logger = logging.getLogger(__name__)


async def compare_levels(
    store: MatrixStore,
    comparison_input: ComparisonInput,
) -> List[EngineeringLevelWithCriteria]:
    """
    Fetch the requested levels with their criteria in one join.

    Ids come back in request order. Unknown ids are skipped and a repeated id
    appears once, at its first position: ["L3", "L3", "L4"] -> [L3, L4].

    Args:
        store: Store accessor for the request.
        comparison_input: Two to four level ids.

    Returns:
        The matching levels, each with its criteria in fetch order.
    """
    requested_ids = list(dict.fromkeys(comparison_input.level_ids))

    try:
        rows = await store.fetch_levels_with_criteria(requested_ids)
        levels_by_id = {level.id: level for level in assemble_levels(rows)}
    except Exception:
        logger.exception("Compare levels failed")
        raise

    ordered = [levels_by_id[level_id] for level_id in requested_ids if level_id in levels_by_id]

    missing = [level_id for level_id in requested_ids if level_id not in levels_by_id]
    if missing:
        logger.info(f"Compare skipped unknown level ids: {missing}")

    return ordered

"""
Row grouping helpers shared by the reader, filter, comparison and overview services.

group_rows_by_key is the single place where flat query rows are bucketed by a
key; buckets and their contents keep first-seen order. assemble_levels builds
EngineeringLevelWithCriteria models from the levels LEFT JOIN criteria rows
returned by MatrixStore.fetch_levels_with_criteria.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, TypeVar

from job_matrix.models.schemas import EngineeringLevelWithCriteria, LevelCriterion
from job_matrix.sql import LEVEL_COLUMNS


T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

CriterionPredicate = Callable[[LevelCriterion], bool]


def group_rows_by_key(rows: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Bucket rows by key, preserving first-seen order of keys and of rows within a bucket.

    Example:
        >>> group_rows_by_key(["L3", "EM1", "L5"], key=lambda level_id: level_id[0])
        {'L': ['L3', 'L5'], 'E': ['EM1']}
    """
    groups: Dict[K, List[T]] = {}
    for row in rows:
        groups.setdefault(key(row), []).append(row)
    return groups


def level_fields(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Pick the engineering level columns out of a plain or joined row."""
    return {column: row[column] for column in LEVEL_COLUMNS}


def joined_criterion(row: Mapping[str, Any]) -> Optional[LevelCriterion]:
    """Criterion half of a joined row, or None when the level had no criteria."""
    if row.get("criterion_id") is None:
        return None
    return LevelCriterion(
        id=row["criterion_id"],
        engineering_level_id=row["criterion_engineering_level_id"],
        category=row["criterion_category"],
        sub_category=row["criterion_sub_category"],
        description=row["criterion_description"],
    )


def assemble_levels(
    rows: Iterable[Mapping[str, Any]],
    include: Optional[CriterionPredicate] = None,
) -> List[EngineeringLevelWithCriteria]:
    """
    Collapse joined level/criterion rows into one model per level.

    Args:
        rows: Rows from MatrixStore.fetch_levels_with_criteria.
        include: Optional predicate; criteria for which it returns False are
            dropped. The owning level is kept regardless.

    Returns:
        Levels in first-seen order, each with its (possibly empty) criteria in
        row order.
    """
    levels: List[EngineeringLevelWithCriteria] = []

    for level_rows in group_rows_by_key(rows, key=lambda row: row["id"]).values():
        criteria = []
        for row in level_rows:
            criterion = joined_criterion(row)
            if criterion is None:
                continue
            if include is None or include(criterion):
                criteria.append(criterion)

        levels.append(
            EngineeringLevelWithCriteria(**level_fields(level_rows[0]), criteria=criteria)
        )

    return levels

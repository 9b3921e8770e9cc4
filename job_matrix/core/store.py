"""
Store accessor for the leveling matrix tables.

MatrixStore wraps a single asyncpg connection and exposes one coroutine per
query the services need. It holds no state beyond that connection, performs no
grouping or filtering of its own, and returns plain dictionaries so callers
are decoupled from asyncpg.Record.

Uniqueness of level ids and the criterion -> level reference are enforced by
the tables' primary-key and foreign-key constraints. The store translates
those constraint violations into the application's error kinds:

- asyncpg.UniqueViolationError     -> LevelConflictError
- asyncpg.ForeignKeyViolationError -> LevelNotFoundError

All other database errors propagate unchanged.

Usage:
    async with pool.acquire() as conn:
        store = MatrixStore(conn)
        rows = await store.fetch_levels()
"""

from typing import Any, Dict, List, Optional, Sequence

import asyncpg
from asyncpg import Connection

from job_matrix.core.exceptions import LevelConflictError, LevelNotFoundError
from job_matrix.sql import (
    get_levels_query,
    get_criteria_query,
    get_levels_with_criteria_query,
    get_search_query,
    get_category_pairs_query,
    get_level_ids_query,
    get_insert_level_query,
    get_insert_criterion_query,
)


class MatrixStore:
    """
    Parameterized query executor bound to one database connection.

    Args:
        conn: An acquired asyncpg connection. The caller owns its lifetime.
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def transaction(self):
        """Return an async context manager running the enclosed calls in one transaction."""
        return self._conn.transaction()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def fetch_levels(self) -> List[Dict[str, Any]]:
        """All level rows ordered by id."""
        rows = await self._conn.fetch(get_levels_query())
        return [dict(row) for row in rows]

    async def fetch_criteria(self) -> List[Dict[str, Any]]:
        """All criterion rows ordered by (category, sub_category, id)."""
        rows = await self._conn.fetch(get_criteria_query())
        return [dict(row) for row in rows]

    async def fetch_levels_with_criteria(
        self,
        level_ids: Optional[Sequence[str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Levels left-joined with their criteria.

        Args:
            level_ids: Restrict to these level ids. None fetches every level.

        Returns:
            One dict per joined row: the level columns plus criterion_id,
            criterion_engineering_level_id, criterion_category,
            criterion_sub_category and criterion_description (all None for a
            level without criteria).
        """
        if level_ids is None:
            rows = await self._conn.fetch(get_levels_with_criteria_query())
        else:
            rows = await self._conn.fetch(
                get_levels_with_criteria_query(filter_by_ids=True),
                list(level_ids),
            )
        return [dict(row) for row in rows]

    async def search_criteria(self, query: str) -> List[Dict[str, Any]]:
        """
        Criterion rows joined with their level where any searchable field
        contains ``query`` case-insensitively.

        Returns:
            Dicts with level_id, level_title, job_title,
            one_sentence_description, criterion_id, category, sub_category
            and description.
        """
        rows = await self._conn.fetch(get_search_query(), query)
        return [dict(row) for row in rows]

    async def fetch_category_pairs(self) -> List[Dict[str, Any]]:
        """Distinct (category, sub_category) pairs in ascending order."""
        rows = await self._conn.fetch(get_category_pairs_query())
        return [dict(row) for row in rows]

    async def fetch_level_ids(self) -> List[str]:
        """All level ids in ascending order."""
        rows = await self._conn.fetch(get_level_ids_query())
        return [row['id'] for row in rows]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def insert_level(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert one engineering level and return the stored row.

        Raises:
            LevelConflictError: If a level with the same id already exists.
        """
        try:
            row = await self._conn.fetchrow(
                get_insert_level_query(),
                values['id'],
                values['title'],
                values.get('job_title'),
                values.get('one_sentence_description'),
                values.get('scope_of_influence_summary'),
                values.get('ownership_summary'),
                values.get('trajectory_notes'),
            )
        except asyncpg.UniqueViolationError as exc:
            raise LevelConflictError(values['id']) from exc
        return dict(row)

    async def insert_criterion(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert one level criterion and return the stored row with its generated id.

        Raises:
            LevelNotFoundError: If engineering_level_id references no level.
        """
        try:
            row = await self._conn.fetchrow(
                get_insert_criterion_query(),
                values['engineering_level_id'],
                values['category'],
                values['sub_category'],
                values.get('description'),
            )
        except asyncpg.ForeignKeyViolationError as exc:
            raise LevelNotFoundError(values['engineering_level_id']) from exc
        return dict(row)

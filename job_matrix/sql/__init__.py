"""
SQL Query Module for the Job Leveling Matrix Backend.

Provides the schema DDL and parameterized SQL queries for the
engineering_levels and level_criteria tables.

Follows Repository Pattern for clean separation between
business logic and data access.

Example usage:
    from job_matrix.sql import get_levels_with_criteria_query

    sql = get_levels_with_criteria_query(filter_by_ids=True)
    rows = await conn.fetch(sql, ["L3", "L5"])
"""

from job_matrix.sql.matrix_queries import (
    get_levels_query,
    get_criteria_query,
    get_levels_with_criteria_query,
    get_search_query,
    get_category_pairs_query,
    get_level_ids_query,
    get_insert_level_query,
    get_insert_criterion_query,
    SCHEMA_DDL,
    LEVEL_COLUMNS,
    CRITERION_COLUMNS,
    SEARCH_COLUMNS,
    LEVELS_TABLE,
    CRITERIA_TABLE,
)

__all__ = [
    'get_levels_query',
    'get_criteria_query',
    'get_levels_with_criteria_query',
    'get_search_query',
    'get_category_pairs_query',
    'get_level_ids_query',
    'get_insert_level_query',
    'get_insert_criterion_query',
    'SCHEMA_DDL',
    'LEVEL_COLUMNS',
    'CRITERION_COLUMNS',
    'SEARCH_COLUMNS',
    'LEVELS_TABLE',
    'CRITERIA_TABLE',
]

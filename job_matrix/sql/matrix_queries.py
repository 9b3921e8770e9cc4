"""
Matrix Queries Module for the Job Leveling Matrix Backend.

Provides the schema DDL and the parameterized PostgreSQL queries run by
MatrixStore against the two matrix tables:

- engineering_levels: one row per level, keyed by a human-assigned text id
- level_criteria: one row per criterion, referencing its level

Identifier and taxonomy ordering uses COLLATE "C" so that rows come back in
plain byte-wise lexicographic order ("EM1" < "L1/L2" < "L3" < "TL1")
regardless of the database's default locale.

This module follows the Repository Pattern for clean separation between
business logic and data access.
"""

from typing import Tuple


# =============================================================================
# CONSTANTS
# =============================================================================

LEVELS_TABLE: str = "engineering_levels"
CRITERIA_TABLE: str = "level_criteria"

# Level columns in select order, shared by the plain and joined queries
LEVEL_COLUMNS: Tuple[str, ...] = (
    "id",
    "title",
    "job_title",
    "one_sentence_description",
    "scope_of_influence_summary",
    "ownership_summary",
    "trajectory_notes",
    "created_at",
)

CRITERION_COLUMNS: Tuple[str, ...] = (
    "id",
    "engineering_level_id",
    "category",
    "sub_category",
    "description",
)

# (table alias, column) pairs a search query is matched against, in order.
# l = engineering_levels, c = level_criteria
SEARCH_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("l", "job_title"),
    ("l", "one_sentence_description"),
    ("c", "category"),
    ("c", "sub_category"),
    ("c", "description"),
)


# =============================================================================
# SCHEMA DDL
# =============================================================================

SCHEMA_DDL: str = f"""
    CREATE TABLE IF NOT EXISTS {LEVELS_TABLE} (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        job_title TEXT,
        one_sentence_description TEXT,
        scope_of_influence_summary TEXT,
        ownership_summary TEXT,
        trajectory_notes TEXT,
        created_at TIMESTAMP NOT NULL DEFAULT now()
    );

    CREATE TABLE IF NOT EXISTS {CRITERIA_TABLE} (
        id SERIAL PRIMARY KEY,
        engineering_level_id TEXT NOT NULL REFERENCES {LEVELS_TABLE}(id),
        category TEXT NOT NULL,
        sub_category TEXT NOT NULL,
        description TEXT
    );
"""


# =============================================================================
# READ QUERIES
# =============================================================================

def get_levels_query() -> str:
    """Select every level ordered by id."""
    return f"""
    SELECT {", ".join(LEVEL_COLUMNS)}
    FROM {LEVELS_TABLE}
    ORDER BY id COLLATE "C"
    """


def get_criteria_query() -> str:
    """Select every criterion ordered by (category, sub_category), id breaking ties."""
    return f"""
    SELECT {", ".join(CRITERION_COLUMNS)}
    FROM {CRITERIA_TABLE}
    ORDER BY category COLLATE "C", sub_category COLLATE "C", id
    """


def get_levels_with_criteria_query(filter_by_ids: bool = False) -> str:
    """
    Generate the levels LEFT JOIN criteria query.

    Each result row carries the level columns unprefixed plus the criterion
    columns aliased with a ``criterion_`` prefix. Levels without criteria
    appear once with NULL criterion columns.

    Args:
        filter_by_ids: When True the query takes one parameter, $1, a text
            array of level ids to restrict to.

    Returns:
        Parameterized PostgreSQL query string.

    Note:
        Rows are ordered by level id then criterion id, so criteria within a
        level come back in insertion order.
    """
    level_select = ",\n        ".join(f"l.{column}" for column in LEVEL_COLUMNS)
    where_clause = "WHERE l.id = ANY($1::text[])" if filter_by_ids else ""

    return f"""
    SELECT
        {level_select},
        c.id AS criterion_id,
        c.engineering_level_id AS criterion_engineering_level_id,
        c.category AS criterion_category,
        c.sub_category AS criterion_sub_category,
        c.description AS criterion_description
    FROM {LEVELS_TABLE} l
    LEFT JOIN {CRITERIA_TABLE} c ON c.engineering_level_id = l.id
    {where_clause}
    ORDER BY l.id COLLATE "C", c.id
    """


def get_search_query() -> str:
    """
    Generate the free-text search query.

    Takes one parameter, $1, the trimmed search text. Matching is a
    case-insensitive literal substring test (strpos on lower-cased values), so
    LIKE wildcards such as % and _ in the search text carry no special meaning.

    Only criteria joined to their level are candidates; a level without
    criteria is never returned.
    """
    conditions = "\n        OR ".join(
        f"strpos(lower({alias}.{column}), lower($1)) > 0"
        for alias, column in SEARCH_COLUMNS
    )

    return f"""
    SELECT
        l.id AS level_id,
        l.title AS level_title,
        l.job_title,
        l.one_sentence_description,
        c.id AS criterion_id,
        c.category,
        c.sub_category,
        c.description
    FROM {LEVELS_TABLE} l
    INNER JOIN {CRITERIA_TABLE} c ON c.engineering_level_id = l.id
    WHERE
        {conditions}
    ORDER BY l.id COLLATE "C", c.id
    """


def get_category_pairs_query() -> str:
    """Select distinct (category, sub_category) pairs in ascending order."""
    return f"""
    SELECT DISTINCT category COLLATE "C" AS category, sub_category COLLATE "C" AS sub_category
    FROM {CRITERIA_TABLE}
    ORDER BY category, sub_category
    """


def get_level_ids_query() -> str:
    """Select all level ids in ascending order."""
    return f"""
    SELECT id
    FROM {LEVELS_TABLE}
    ORDER BY id COLLATE "C"
    """


# =============================================================================
# WRITE QUERIES
# =============================================================================

def get_insert_level_query() -> str:
    """
    Generate the level INSERT.

    Parameters $1-$7 map to id, title, job_title, one_sentence_description,
    scope_of_influence_summary, ownership_summary, trajectory_notes. created_at
    is left to the column default.
    """
    return f"""
    INSERT INTO {LEVELS_TABLE} (
        id, title, job_title, one_sentence_description,
        scope_of_influence_summary, ownership_summary, trajectory_notes
    ) VALUES ($1, $2, $3, $4, $5, $6, $7)
    RETURNING {", ".join(LEVEL_COLUMNS)}
    """


def get_insert_criterion_query() -> str:
    """Generate the criterion INSERT; $1-$4 map to level id, category, sub_category, description."""
    return f"""
    INSERT INTO {CRITERIA_TABLE} (
        engineering_level_id, category, sub_category, description
    ) VALUES ($1, $2, $3, $4)
    RETURNING {", ".join(CRITERION_COLUMNS)}
    """

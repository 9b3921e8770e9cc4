"""
Backend Services Module

This module contains the read and write operations over the leveling matrix.
Each service is a stateless coroutine that takes the store accessor as its
first argument, so it can be exercised against any object with the
MatrixStore interface.

Services:
- levels: get_all_levels, get_level_by_id
- authoring: create_engineering_level, create_level_criterion
- filtering: get_filtered_levels
- search: search_levels and the snippet builder
- comparison: compare_levels
- overview: get_matrix_overview and the level grouping policy
- seed: seed_database and the sample dataset
- grouping: row grouping helpers shared by the services above

All services are designed to be consumed by the API layer (job_matrix/api/).
"""

from job_matrix.services.grouping import (
    group_rows_by_key,
    assemble_levels,
)

from job_matrix.services.levels import (
    get_all_levels,
    get_level_by_id,
)

from job_matrix.services.authoring import (
    create_engineering_level,
    create_level_criterion,
)

from job_matrix.services.filtering import (
    get_filtered_levels,
)

from job_matrix.services.search import (
    search_levels,
    build_match_snippet,
    SNIPPET_FIELDS,
    SNIPPET_CONTEXT_CHARS,
)

from job_matrix.services.comparison import (
    compare_levels,
)

from job_matrix.services.overview import (
    get_matrix_overview,
    classify_level_id,
)

from job_matrix.services.seed import (
    seed_database,
    SEED_ENGINEERING_LEVELS,
    SEED_LEVEL_CRITERIA,
)

__all__ = [
    # Grouping helpers
    'group_rows_by_key',
    'assemble_levels',
    # Level reader
    'get_all_levels',
    'get_level_by_id',
    # Level writer
    'create_engineering_level',
    'create_level_criterion',
    # Filter engine
    'get_filtered_levels',
    # Search engine
    'search_levels',
    'build_match_snippet',
    'SNIPPET_FIELDS',
    'SNIPPET_CONTEXT_CHARS',
    # Comparator
    'compare_levels',
    # Overview builder
    'get_matrix_overview',
    'classify_level_id',
    # Seeder
    'seed_database',
    'SEED_ENGINEERING_LEVELS',
    'SEED_LEVEL_CRITERIA',
]

'''
Job Leveling Matrix Test Suite

Test Modules:
-------------
- test_store.py: MatrixStore query plumbing and constraint-error translation
  against a mocked asyncpg connection; schema bootstrap
- test_grouping.py: row bucketing and level assembly helpers
- test_levels.py: list and get-by-id readers
- test_authoring.py: level and criterion creation, conflicts, unknown levels
- test_filtering.py: category / sub-category allow-lists
- test_search.py: snippet construction and free-text search
- test_comparison.py: side-by-side comparison ordering and bounds
- test_overview.py: taxonomy, level ids and level groups
- test_seed.py: sample dataset and all-or-nothing seeding
- test_api.py: HTTP contract (status codes, bodies, path ids with '/')

Running Tests:
--------------
    pip install -e ".[test]"
    pytest -v

Configuration:
--------------
See conftest.py for shared fixtures, including the in-memory store double.
'''

__all__ = []
